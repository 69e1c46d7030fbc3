from .async_db import create_async_db_and_tables, create_engine, create_session_factory
from .models import UserRecord

__all__ = [
    "UserRecord",
    "create_async_db_and_tables",
    "create_engine",
    "create_session_factory",
]
