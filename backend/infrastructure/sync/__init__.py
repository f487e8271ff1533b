from .sheets_sync_client import SheetsSyncClient

__all__ = ["SheetsSyncClient"]
