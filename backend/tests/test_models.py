"""
Community Garden Backend — Schema Constraint Tests
===================================================

What:  Checks the tables created by Database.create_schema() against a real
       SQLite database.
Why:   users and plantings have no repository, so their constraints are
       only enforced by the schema itself.

What we test:
    ✅ users.username and users.email are unique
    ✅ users.username, password and email are required
    ✅ plantings.plot_id references plots.id and is required
    ✅ A planting for an existing plot is stored and loads with its plot
"""

from datetime import date

import pytest
from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from garden.models.planting import Planting
from garden.models.plot import Plot
from garden.models.user import User


def gardener(**overrides) -> User:
    values = {"username": "rosa", "password": "secret", "email": "rosa@example.org", "role": "member"}
    values.update(overrides)
    return User(**values)


class TestUserConstraints:

    @pytest.mark.asyncio
    async def test_user_round_trip(self, db_session):
        db_session.add(gardener(role=None))
        await db_session.commit()

        user = (await db_session.execute(select(User))).scalar_one()
        assert (user.username, user.email, user.role) == ("rosa", "rosa@example.org", None)

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, db_session):
        db_session.add(gardener())
        await db_session.commit()

        db_session.add(gardener(email="other@example.org"))
        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()

        assert len((await db_session.execute(select(User))).scalars().all()) == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, db_session):
        db_session.add(gardener())
        await db_session.commit()

        db_session.add(gardener(username="ana"))
        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("column", ["username", "password", "email"])
    async def test_required_column_rejects_null(self, db_session, column):
        db_session.add(gardener(**{column: None}))

        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    def test_password_not_in_repr(self):
        assert "secret" not in repr(gardener())


class TestPlantingConstraints:

    @pytest.mark.asyncio
    async def test_plot_id_references_plots(self, database):
        async with database.engine.connect() as conn:
            foreign_keys = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_foreign_keys("plantings")
            )

        assert [(fk["constrained_columns"], fk["referred_table"], fk["referred_columns"])
                for fk in foreign_keys] == [(["plot_id"], "plots", ["id"])]

    @pytest.mark.asyncio
    async def test_plot_id_required(self, db_session):
        db_session.add(Planting(plant_name="Kale"))

        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    @pytest.mark.asyncio
    async def test_planting_for_existing_plot(self, db_session):
        plot = Plot(name="North Bed", status="planted")
        db_session.add(plot)
        await db_session.flush()
        db_session.add(
            Planting(
                plot_id=plot.id,
                plant_name="Tomato",
                quantity=6,
                planted_on=date(2026, 5, 1),
                status="growing",
            )
        )
        await db_session.commit()

        result = await db_session.execute(
            select(Plot)
            .where(Plot.id == plot.id)
            .options(selectinload(Plot.plantings))
            .execution_options(populate_existing=True)
        )
        loaded = result.scalar_one()

        assert [(p.plant_name, p.quantity, p.planted_on) for p in loaded.plantings] == [
            ("Tomato", 6, date(2026, 5, 1)),
        ]
