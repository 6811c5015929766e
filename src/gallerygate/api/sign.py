from fastapi import APIRouter, Depends

from gallerygate.auth_utils import get_current_owner
from gallerygate.config import GallerySettings, get_gallery_settings
from gallerygate.dependencies import get_sign_history_repository
from gallerygate.logger import logger as event_logger
from gallerygate.repositories.sign_history_repository import SignHistoryRepository
from gallerygate.schemas.common import OK, StatusResponse
from gallerygate.schemas.sign import SignActionRequest, SignEvent
from gallerygate.time_utils import now_formatted

router = APIRouter(tags=["sign"])


@router.post("/userSignAction", response_model=StatusResponse)
def record_sign_action(
    request: SignActionRequest,
    repo: SignHistoryRepository = Depends(get_sign_history_repository),
    settings: GallerySettings = Depends(get_gallery_settings),
):
    timestamp = now_formatted(settings.time_zone)
    repo.record(request.username, timestamp, request.action)
    event_logger.log_event("user_sign_action", username=request.username, action=request.action.value, timestamp=timestamp)
    return OK


# Every user, every period: there is no filtering by user or time range
@router.get("/usersSign", response_model=list[SignEvent])
def list_sign_history(
    repo: SignHistoryRepository = Depends(get_sign_history_repository),
    _owner: str = Depends(get_current_owner),
) -> list[SignEvent]:
    return repo.list_all()
