"""
Community Garden Backend — Plot Repository
===========================================

What:  All reads and writes of the `plots` table.
Why:   Keeps SQL and SQLAlchemy exceptions out of the service layer.
How:   Wraps one AsyncSession per request. Each save() is its own
       transaction: it flushes, commits, and returns the persisted Plot.
Who:   Constructed per request by the get_plot_service dependency.

Save dispatch:
    PlotCreate(fields)       → INSERT INTO plots (...)          → new id
    PlotUpdate(id, fields)   → UPDATE plots SET ... WHERE id=?  → same id
                               (0 rows matched → PlotNotFoundError)

Error policy:
    SQLAlchemyError (connection refused, lost connection, constraint
    violation) → session rolled back → StoreError. PlotNotFoundError passes
    through untouched.
"""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from garden.exceptions import PlotNotFoundError, StoreError
from garden.models.plot import Plot
from garden.schemas.plot import PlotCommand, PlotCreate, PlotUpdate

logger = logging.getLogger(__name__)


class PlotRepository:
    """
    Data access for Plot rows.

    Args:
        session: Async database session for the current request
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> List[Plot]:
        """
        Return every plot, ordered by id. Empty list when there are none.

        No pagination: the whole table is returned.
        """
        try:
            result = await self.session.execute(select(Plot).order_by(Plot.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._store_error("find_all", e)

    async def find_by_id(self, plot_id: int) -> Optional[Plot]:
        """Return the plot with this id, or None."""
        try:
            result = await self.session.execute(select(Plot).where(Plot.id == plot_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._store_error("find_by_id", e, plot_id=plot_id)

    async def find_by_status(self, status: str) -> List[Plot]:
        """
        Return plots whose status equals `status` exactly.

        Matching is case-sensitive on every backend. Collations such as
        MySQL's default compare case-insensitively, so rows returned by the
        WHERE clause are re-checked in Python.
        """
        try:
            result = await self.session.execute(
                select(Plot).where(Plot.status == status).order_by(Plot.id)
            )
            return [plot for plot in result.scalars().all() if plot.status == status]
        except SQLAlchemyError as e:
            raise await self._store_error("find_by_status", e, status=status)

    async def save(self, command: PlotCommand) -> Plot:
        """
        Insert or update a plot, as decided by the command type.

        Args:
            command: PlotCreate for a new row, PlotUpdate to overwrite a row by id

        Returns:
            The persisted Plot (with its id)

        Raises:
            PlotNotFoundError: PlotUpdate for an id that is not in the table
            StoreError:    Any database failure
        """
        try:
            if isinstance(command, PlotCreate):
                plot = await self._insert(command)
            elif isinstance(command, PlotUpdate):
                plot = await self._update(command)
            else:
                raise TypeError(f"Unsupported save command: {type(command).__name__}")
            await self.session.commit()
            return plot
        except SQLAlchemyError as e:
            raise await self._store_error("save", e)

    # ── Store operations ──────────────────────────────────────────────────

    async def _insert(self, command: PlotCreate) -> Plot:
        plot = Plot(**command.fields.model_dump())
        self.session.add(plot)
        await self.session.flush()  # Assigns the autoincrement id
        logger.info("Plot created: id=%s name=%r", plot.id, plot.name)
        return plot

    async def _update(self, command: PlotUpdate) -> Plot:
        result = await self.session.execute(
            update(Plot)
            .where(Plot.id == command.id)
            .values(**command.fields.model_dump())
        )
        if result.rowcount == 0:
            await self.session.rollback()
            raise PlotNotFoundError(command.id)

        # populate_existing refreshes a copy already held in the identity map
        reloaded = await self.session.execute(
            select(Plot)
            .where(Plot.id == command.id)
            .execution_options(populate_existing=True)
        )
        plot = reloaded.scalar_one()
        logger.info("Plot updated: id=%s status=%r", plot.id, plot.status)
        return plot

    async def _store_error(self, operation: str, error: SQLAlchemyError, **context) -> StoreError:
        """Roll back the failed transaction and build the StoreError to raise."""
        logger.error("Plot store failure during %s: %s", operation, str(error))
        try:
            await self.session.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback after failed %s also failed", operation)
        return StoreError(
            context={"operation": operation, "error_type": type(error).__name__, **context},
        )
