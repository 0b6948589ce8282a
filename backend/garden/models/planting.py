"""
Community Garden Backend — Planting SQLAlchemy Model
=====================================================

What:  Minimal ORM model for the `plantings` table (what grows in a plot).
Why:   Gives the plot → plantings relation a concrete target table with a
       real foreign key to `plots.id`.
Who:   Only Database.create_schema() touches it; no repository reads or
       writes plantings.
"""

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from garden.database import Base

if TYPE_CHECKING:
    from garden.models.plot import Plot


class Planting(Base):
    __tablename__ = "plantings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    plot_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("plots.id"),
        nullable=False,
        index=True,
    )

    plant_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    quantity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    planted_on: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # planted → growing → harvested
    status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    plot: Mapped["Plot"] = relationship(back_populates="plantings", lazy="raise")

    def __repr__(self) -> str:
        return f"<Planting(id={self.id}, plot_id={self.plot_id}, plant_name='{self.plant_name}')>"
