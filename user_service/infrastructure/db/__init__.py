from .postgres_connection import create_db_engine, init_schema
from .schema import metadata, users
from .sql_user_repository import SqlUserRepository

__all__ = [
    "create_db_engine",
    "init_schema",
    "metadata",
    "users",
    "SqlUserRepository",
]
