import os


def get_app_data_directory_env():
    return os.getenv("APP_DATA_DIRECTORY", "/tmp/app_data")


def get_database_url_env():
    return os.getenv("DATABASE_URL")


def get_cors_allow_origins_env():
    return os.getenv("CORS_ALLOW_ORIGINS", "*")


def get_log_level_env():
    return os.getenv("LOG_LEVEL", "INFO")


def get_host_env():
    return os.getenv("HOST", "0.0.0.0")


def get_port_env():
    return os.getenv("PORT", "8000")
