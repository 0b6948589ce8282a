"""
Community Garden Backend — Plot Form & Save Command Schemas
============================================================

What:  Pydantic models for the plot form and the explicit save decision.
Why:   The HTML form arrives as loose string fields. It is bound into a
       structured `PlotForm` at the route boundary, then turned into one of
       two commands so the repository never has to guess between INSERT and
       UPDATE.
How:
    PlotForm(id=None, ...)  → to_command() → PlotCreate(fields)
    PlotForm(id=7, ...)     → to_command() → PlotUpdate(id=7, fields)

Validation:
    None beyond types. Missing or empty form fields arrive as None and are
    stored as NULL; lengths and values are not checked.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


# Lifecycle labels offered as suggestions in the form; status stays free text
STATUS_SUGGESTIONS = ("available", "assigned", "planted")


class PlotFields(BaseModel):
    """The writable columns of a plot, shared by both commands."""

    name: Optional[str] = None
    status: Optional[str] = None
    size: Optional[str] = None
    location: Optional[str] = None

    model_config = {"frozen": True}


class PlotCreate(BaseModel):
    """Insert a new row; the store assigns the id."""

    fields: PlotFields

    model_config = {"frozen": True}


class PlotUpdate(BaseModel):
    """Overwrite the row with this id."""

    id: int
    fields: PlotFields

    model_config = {"frozen": True}


PlotCommand = Union[PlotCreate, PlotUpdate]


class PlotForm(BaseModel):
    """
    What:  Structured binding of the create/edit form.
    Who:   Built by the POST /plots/save handler from form fields, and by the
           GET /plots/new and /plots/{id}/edit handlers as the template's `plot`.

    from_attributes lets an ORM Plot be bound directly for the edit form.
    """

    id: Optional[int] = Field(default=None, description="Present when editing an existing plot")
    name: Optional[str] = None
    status: Optional[str] = None
    size: Optional[str] = None
    location: Optional[str] = None

    model_config = {"from_attributes": True}

    def to_command(self) -> PlotCommand:
        """Choose INSERT or UPDATE by whether an id was supplied."""
        fields = PlotFields(
            name=self.name,
            status=self.status,
            size=self.size,
            location=self.location,
        )
        if self.id is None:
            return PlotCreate(fields=fields)
        return PlotUpdate(id=self.id, fields=fields)
