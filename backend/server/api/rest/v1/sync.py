from __future__ import annotations

from fastapi import APIRouter, Depends

from application.journal.journal_service import JournalService
from server.api.rest.dependencies import get_journal_service
from server.models.schemas import (
    CloudSettingsRequest,
    JournalStateResponse,
    SyncResultResponse,
    SyncStatusResponse,
)

router = APIRouter(prefix="/api/v1", tags=["sync-v1"])


def _state_response(service: JournalService) -> JournalStateResponse:
    state = service.state
    return JournalStateResponse(
        view=state.view,
        cloud_url=state.cloud_url,
        sync_status=state.sync_status.value,
        count=len(state.movies),
    )


@router.get("/state", response_model=JournalStateResponse)
async def get_state(service: JournalService = Depends(get_journal_service)) -> JournalStateResponse:
    return _state_response(service)


@router.post("/session/enter", response_model=JournalStateResponse)
async def enter_journal(service: JournalService = Depends(get_journal_service)) -> JournalStateResponse:
    """Pass the welcome screen. Pulls from the cloud in the background when configured."""
    await service.enter()
    return _state_response(service)


@router.post("/sync/pull", response_model=SyncResultResponse)
async def sync_now(service: JournalService = Depends(get_journal_service)) -> SyncResultResponse:
    """Sync now: replace local entries with the remote list (no-op without an endpoint)."""
    status = await service.pull()
    return SyncResultResponse(status=status.value, count=len(service.movies))


@router.get("/sync/status", response_model=SyncStatusResponse)
async def get_sync_status(service: JournalService = Depends(get_journal_service)) -> SyncStatusResponse:
    state = service.state
    return SyncStatusResponse(status=state.sync_status.value, cloud_url=state.cloud_url)


@router.get("/settings/cloud", response_model=CloudSettingsRequest)
async def get_cloud_settings(service: JournalService = Depends(get_journal_service)) -> CloudSettingsRequest:
    return CloudSettingsRequest(cloud_url=service.state.cloud_url)


@router.put("/settings/cloud", response_model=JournalStateResponse)
async def save_cloud_settings(
    req: CloudSettingsRequest,
    service: JournalService = Depends(get_journal_service),
) -> JournalStateResponse:
    await service.set_cloud_url(req.cloud_url)
    return _state_response(service)
