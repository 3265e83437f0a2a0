import os
from typing import Tuple

from sqlalchemy.engine import make_url

from utils.get_env import get_app_data_directory_env, get_database_url_env


def get_database_url_and_connect_args() -> Tuple[str, dict]:
    """
    Resolve the async database URL and the driver connect args.

    Falls back to a SQLite file inside the app data directory when
    DATABASE_URL is not set.
    """
    database_url = get_database_url_env()
    if not database_url:
        app_data_directory = get_app_data_directory_env()
        database_url = f"sqlite+aiosqlite:///{os.path.join(app_data_directory, 'slides.db')}"

    connect_args = {}
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        # File-backed SQLite needs its parent directory to exist
        if url.database and url.database != ":memory:":
            directory = os.path.dirname(os.path.abspath(url.database))
            os.makedirs(directory, exist_ok=True)

    return database_url, connect_args
