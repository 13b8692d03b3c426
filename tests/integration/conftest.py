"""Fixtures running the services against a throwaway SQLite database."""

from collections.abc import AsyncIterator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from carrental.config import Settings
from carrental.infrastructure.database import create_engine_from_settings, create_session_factory
from carrental.infrastructure.dependencies import CarRentalServices, build_services, init_database


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncIterator[AsyncEngine]:
    settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'ledger.db'}",
        db_statement_timeout=5.0,
    )
    engine = create_engine_from_settings(settings)
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def services(session_factory) -> CarRentalServices:
    return build_services(session_factory)
