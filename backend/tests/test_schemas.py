"""
Community Garden Backend — Form Binding & Settings Tests
=========================================================

What:  Tests for PlotForm → command dispatch and for Settings validation.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from garden.config import Settings
from garden.schemas.plot import PlotCreate, PlotForm, PlotUpdate


class TestPlotFormToCommand:

    def test_form_without_id_becomes_create(self):
        form = PlotForm(name="North Bed", status="active", size="4x8", location="Row 1")

        command = form.to_command()

        assert isinstance(command, PlotCreate)
        assert command.fields.name == "North Bed"
        assert command.fields.location == "Row 1"

    def test_form_with_id_becomes_update(self):
        command = PlotForm(id=7, status="fallow").to_command()

        assert isinstance(command, PlotUpdate)
        assert command.id == 7
        assert command.fields.status == "fallow"
        assert command.fields.name is None

    def test_empty_form_is_a_create_with_null_fields(self):
        command = PlotForm().to_command()

        assert isinstance(command, PlotCreate)
        assert command.fields.model_dump() == {
            "name": None, "status": None, "size": None, "location": None,
        }

    def test_status_is_not_restricted(self):
        """Any label is accepted; there is no closed set of statuses."""
        command = PlotForm(status="Resting Until Spring").to_command()
        assert command.fields.status == "Resting Until Spring"


class TestSettings:

    def test_log_level_is_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")

    def test_is_sqlite(self):
        assert Settings(database_url="sqlite+aiosqlite:///./x.db").is_sqlite
        assert not Settings(database_url="postgresql+asyncpg://u:p@h/db").is_sqlite
