"""
Infrastructure layer (no journal semantics).

Adapters behind the application ports: local journal storage, the remote
spreadsheet sync client, and logging helpers shared between them.
"""

__all__ = [
    "config",
    "persistence",
    "sync",
    "utils",
]
