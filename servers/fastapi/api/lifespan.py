from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from services.database import create_db_and_tables, sql_engine


@asynccontextmanager
async def app_lifespan(_: FastAPI):
    """
    Create the slides table on startup and release pooled
    connections on shutdown.
    """
    await create_db_and_tables()
    logging.info("Database ready")
    yield
    await sql_engine.dispose()
