from comicverse.db.database import (
    create_db_engine,
    create_session_factory,
    get_session,
    init_db,
)
from comicverse.db.operations import (
    delete_record,
    get_record,
    list_keys,
    put_record,
)

__all__ = [
    "create_db_engine",
    "create_session_factory",
    "delete_record",
    "get_record",
    "get_session",
    "init_db",
    "list_keys",
    "put_record",
]
