import atexit

import structlog
from django.apps import AppConfig
from django.db import connections

logger = structlog.get_logger(__name__)


def close_connection_pools() -> None:
    """Close every backend-managed connection pool (no-op for unpooled backends)."""
    for conn in connections.all(initialized_only=True):
        close_pool = getattr(conn, "close_pool", None)
        if close_pool is None:
            continue
        close_pool()
        logger.info("database.pool_closed", alias=conn.alias)


class CoreConfig(AppConfig):
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        atexit.register(close_connection_pools)
