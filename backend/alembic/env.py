"""
Alembic Migration Environment
===============================

What:  Runs MangoNote schema migrations with the application's async engine.
How:   The database URL comes from app.config.settings (not alembic.ini);
       online migrations open an AsyncEngine and run the migration steps
       through connection.run_sync().
Who:   `alembic upgrade head`, `alembic revision --autogenerate`, ...
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from app.config import settings
from app.database import Base

# Registers the tables on Base.metadata for --autogenerate
from app.models.note import Note  # noqa: F401
from app.models.mind_map import MindMap  # noqa: F401
from app.models.flashcard import Flashcard, FlashcardReview  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

config.set_main_option("sqlalchemy.url", settings.database_url)


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply pending migrations over a short-lived, unpooled async engine."""
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with engine.connect() as connection:
        await connection.run_sync(_run_with_connection)

    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
