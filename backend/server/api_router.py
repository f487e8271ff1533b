from __future__ import annotations

from fastapi import APIRouter

import server.api.rest.v1.movies as movies_v1
import server.api.rest.v1.pages as pages_v1
import server.api.rest.v1.sync as sync_v1

# Canonical API router aggregator (v1 JSON API + the HTML page).
api_router = APIRouter()
api_router.include_router(movies_v1.router)
api_router.include_router(sync_v1.router)
api_router.include_router(pages_v1.router)

__all__ = ["api_router"]
