from core.catalog import build_catalog  # noqa: F401
from core.db_connector import Database, create_engine_from_url  # noqa: F401
from core.explorer import Explorer  # noqa: F401
