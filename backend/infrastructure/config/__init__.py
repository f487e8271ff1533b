from __future__ import annotations

from infrastructure.config.settings import (  # noqa: F401
    CINELOG_STORE_PATH,
    CLOUD_SYNC_TIMEOUT_S,
    CLOUD_SYNC_USER_AGENT,
    RUNTIME_ROOT,
)

__all__ = [
    "CINELOG_STORE_PATH",
    "CLOUD_SYNC_TIMEOUT_S",
    "CLOUD_SYNC_USER_AGENT",
    "RUNTIME_ROOT",
]
