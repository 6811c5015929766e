import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError

from gallerygate.api.auth import get_user_repository, hash_password
from gallerygate.errors import ConflictError
from gallerygate.repositories.user_repository import UserRepository
from gallerygate.schemas.auth import UserCreateRequest
from gallerygate.schemas.common import OK, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["user"])


@router.post("/user", response_model=StatusResponse)
def register_user(request: UserCreateRequest, repo: UserRepository = Depends(get_user_repository)):
    if repo.get_user_by_username(request.username):
        raise ConflictError(message="Username already exists")
    try:
        repo.create_user(request.username, request.name, str(request.email), hash_password(request.password))
    except IntegrityError as err:
        raise ConflictError(message="Username already exists") from err
    logger.info("Registered user %s", request.username)
    return OK
