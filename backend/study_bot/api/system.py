# study_bot/api/system.py
from fastapi import APIRouter, Depends, Query

from ..dependencies import get_notification_service, require_admin
from ..schemas.auth import User
from ..schemas.system import HealthResponse, NotifyOwnerRequest, NotifyOwnerResponse
from ..services.notification import NotificationService

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health(timestamp: float = Query(..., ge=0)) -> HealthResponse:
    return HealthResponse(ok=True)


@router.post("/notify-owner")
async def notify_owner(
        payload: NotifyOwnerRequest,
        _admin: User = Depends(require_admin),
        service: NotificationService = Depends(get_notification_service)
) -> NotifyOwnerResponse:
    delivered = await service.notify_owner(payload.title, payload.content)
    return NotifyOwnerResponse(success=delivered)
