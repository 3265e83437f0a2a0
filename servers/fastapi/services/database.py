from collections.abc import AsyncGenerator
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)
from sqlalchemy.exc import OperationalError
from sqlmodel import SQLModel

from models.sql.slide import SlideModel
from utils.db_utils import get_database_url_and_connect_args

logger = logging.getLogger(__name__)


database_url, connect_args = get_database_url_and_connect_args()

sql_engine: AsyncEngine = create_async_engine(database_url, connect_args=connect_args)
async_session_maker = async_sessionmaker(sql_engine, expire_on_commit=False)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session


# ---------------------------------------------------------------------------
# CREATE TABLES
# ---------------------------------------------------------------------------
async def create_db_and_tables(engine: Optional[AsyncEngine] = None):
    engine = engine or sql_engine
    async with engine.begin() as conn:
        try:
            await conn.run_sync(
                lambda sync_conn: SQLModel.metadata.create_all(
                    sync_conn,
                    tables=[SlideModel.__table__],
                )
            )
        except OperationalError as e:
            if "already exists" in str(e):
                logger.warning("Slides table or index already exists, skipping creation")
            else:
                raise
