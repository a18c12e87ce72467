"""User Routes — list, detail, registration, partial update, delete and avatar upload.

Invariants:
    - List answers 404 when the requested page is empty
    - Registration answers 201 on insert, 200 with no body when the email already exists
    - Every /users/{user_id} route runs check_user_id, then auth, then ownership
"""

import logging

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from wallet_api.api.dependencies import (
    check_user_id, get_current_identity, owns_user_param,
)
from wallet_api.api.envelope import endpoint_response
from wallet_api.config import Settings, get_settings
from wallet_api.core.domain_types import UserId
from wallet_api.core.pagination import build_page_links
from wallet_api.core.uploads import check_image_upload
from wallet_api.infrastructure.database import get_db
from wallet_api.infrastructure.storage import save_upload
from wallet_api.models.user import User
from wallet_api.schemas.user import (
    UserCreate, UserEdited, UserOut, UserSummary, UserUpdate,
)
from wallet_api.services import user_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", dependencies=[Depends(get_current_identity)])
async def list_users(
    request: Request,
    page: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Paginated user list (page size from settings)."""
    rows, total = await user_service.list_users(db, page, settings.page_size)
    return endpoint_response(
        code=status.HTTP_200_OK if rows else status.HTTP_404_NOT_FOUND,
        message="User retrieved successfully",
        body=[UserSummary.model_validate(u) for u in rows],
        options=build_page_links(settings.page_size, total, page, request.url),
    )


@router.get("/{user_id}", dependencies=[Depends(owns_user_param)])
async def get_user(
    user: User = Depends(check_user_id),
):
    return endpoint_response(
        message="User retrieved successfully",
        body=UserOut.model_validate(user),
    )


@router.post("")
async def create_user(
    payload: UserCreate, db: AsyncSession = Depends(get_db),
):
    """Register a user; an existing email is a no-op."""
    user, created = await user_service.find_or_create_user(db, payload)
    return endpoint_response(
        code=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        message="User created" if created else "Email provided already existing",
        body=UserOut.model_validate(user) if created else None,
    )


@router.patch("/{user_id}", dependencies=[Depends(owns_user_param)])
async def edit_user(
    payload: UserUpdate,
    user: User = Depends(check_user_id),
    db: AsyncSession = Depends(get_db),
):
    row = await user_service.update_user(db, UserId(user.id), payload)
    return endpoint_response(
        message="User edited", body=UserEdited.model_validate(row),
    )


@router.delete("/{user_id}", dependencies=[Depends(owns_user_param)])
async def delete_user(
    user: User = Depends(check_user_id),
    db: AsyncSession = Depends(get_db),
):
    await user_service.delete_user(db, UserId(user.id))
    return endpoint_response(message="User eliminated")


@router.post("/{user_id}/avatar", dependencies=[Depends(owns_user_param)])
async def upload_avatar(
    image: UploadFile = File(...),
    user: User = Depends(check_user_id),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Store a single image (svg/jpg/png/webp, size-limited) as the user's avatar."""
    content = await image.read(settings.upload_max_bytes + 1)
    check_image_upload(
        image.filename, image.content_type, len(content), settings.upload_max_bytes,
    )
    path = await run_in_threadpool(
        save_upload, settings.upload_dir, image.filename, content,
    )
    user = await user_service.set_avatar(db, user, path)
    logger.info("Avatar updated", extra={"user_id": user.id})
    return endpoint_response(
        message="Avatar updated", body=UserOut.model_validate(user),
    )
