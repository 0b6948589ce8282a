"""
Community Garden Backend — Plot Service
========================================

What:  Use cases behind the plot pages: list, fetch one, save.
Why:   Keeps route handlers free of repository wiring.
How:   Pure delegation to PlotRepository. No validation, no transformation,
       no error translation; repository errors propagate unchanged.
Who:   Built per request by get_plot_service() and injected into routes.
"""

import logging
from typing import List

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from garden.database import get_db_session
from garden.exceptions import PlotNotFoundError
from garden.models.plot import Plot
from garden.repositories.plot_repository import PlotRepository
from garden.schemas.plot import PlotCommand

logger = logging.getLogger(__name__)


class PlotService:
    """
    Business layer for plots.

    Stateless apart from the repository it is given; one instance per request.
    """

    def __init__(self, repository: PlotRepository):
        self.repository = repository

    async def get_all_plots(self) -> List[Plot]:
        return await self.repository.find_all()

    async def save_plot(self, command: PlotCommand) -> Plot:
        return await self.repository.save(command)

    async def get_plot(self, plot_id: int) -> Plot:
        """
        Fetch one plot for the edit form.

        Raises:
            PlotNotFoundError: No plot has this id (→ 404)
        """
        plot = await self.repository.find_by_id(plot_id)
        if plot is None:
            raise PlotNotFoundError(plot_id)
        return plot


# ── Dependency ────────────────────────────────────────────────────────────
def get_plot_service(db: AsyncSession = Depends(get_db_session)) -> PlotService:
    """FastAPI dependency: one repository + service per request session."""
    return PlotService(PlotRepository(db))
