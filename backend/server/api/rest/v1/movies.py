from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from application.journal.journal_service import JournalService
from domain.journal import EntryNotFoundError
from server.api.rest.dependencies import get_journal_service
from server.models.schemas import MovieCreateRequest, MovieUpdateRequest, movie_to_response

router = APIRouter(prefix="/api/v1", tags=["movies-v1"])


@router.get("/movies")
async def list_movies(
    q: Optional[str] = Query(default=None, description="按标题/导演/国家搜索（不区分大小写）"),
    service: JournalService = Depends(get_journal_service),
) -> List[Dict[str, Any]]:
    return [movie_to_response(m) for m in service.search(q)]


@router.get("/movies/{entry_id}")
async def get_movie(
    entry_id: int,
    service: JournalService = Depends(get_journal_service),
) -> Dict[str, Any]:
    try:
        return movie_to_response(service.get(entry_id))
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="movie not found")


@router.post("/movies")
async def add_movie(
    req: MovieCreateRequest,
    service: JournalService = Depends(get_journal_service),
) -> Dict[str, Any]:
    entry = await service.add(req.to_draft())
    return movie_to_response(entry)


@router.patch("/movies/{entry_id}")
async def update_movie(
    entry_id: int,
    req: MovieUpdateRequest,
    service: JournalService = Depends(get_journal_service),
) -> Dict[str, Any]:
    try:
        entry = await service.update(entry_id, req.to_changes())
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="movie not found")
    return movie_to_response(entry)


@router.delete("/movies/{entry_id}", status_code=204, response_class=Response)
async def delete_movie(
    entry_id: int,
    confirm: bool = Query(False, description="删除不可恢复，必须显式确认"),
    service: JournalService = Depends(get_journal_service),
) -> Response:
    try:
        removed = await service.remove(entry_id, confirmed=confirm)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="movie not found")
    if not removed:
        raise HTTPException(status_code=409, detail="delete requires confirm=true")
    return Response(status_code=204)
