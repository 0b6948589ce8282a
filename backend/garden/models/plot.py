"""
Community Garden Backend — Plot SQLAlchemy Model
=================================================

What:  ORM model representing the `plots` table (one garden bed per row).
Why:   Maps Python objects to database rows for the plot repository.
Who:   Used by PlotRepository for every query and by Database.create_schema().
When:  Instantiated when a plot is created; loaded when plots are listed.

Table Design:
    - Integer autoincrement primary key, assigned once by the store on INSERT
    - name, status, size, location: free text, all nullable, none unique
    - status is deliberately NOT an enum: any label the gardeners type is kept
      as-is and matched exactly by find_by_status()

    The only relationship is plot → plantings (one-to-many). It is declared
    so the foreign key from `plantings.plot_id` resolves, but no operation
    ever loads it.
"""

from typing import List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from garden.database import Base
from garden.models.planting import Planting


class Plot(Base):
    """
    Represents one garden bed.

    Lifecycle:
        1. Created by PlotRepository.save(PlotCreate(...)); the store assigns the id
        2. Rewritten by PlotRepository.save(PlotUpdate(id, ...)); same row, same id
        3. Never deleted
    """

    __tablename__ = "plots"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier, immutable after creation",
    )

    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Free-form lifecycle label, e.g. 'available', 'assigned', 'planted', 'fallow'
    status: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="Free-form lifecycle label; compared case-sensitively",
    )

    size: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # lazy="raise": plantings are opaque here and must never be lazy-loaded
    # (an implicit load would also fail under AsyncSession)
    plantings: Mapped[List[Planting]] = relationship(
        back_populates="plot",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return (
            f"<Plot(id={self.id}, name='{self.name}', status='{self.status}', "
            f"size='{self.size}', location='{self.location}')>"
        )
