"""First-run setup: create the initial SUPER_ADMIN when none exists yet."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from wisata.api.deps import get_credential_store
from wisata.core.security import hash_password
from wisata.models.user import Role
from wisata.schemas.auth import (
    PublicUser,
    SuperAdminCheckResponse,
    SuperAdminInitRequest,
    SuperAdminInitResponse,
)
from wisata.services.credentials import CredentialStore
from wisata.services.errors import DuplicateEmail, SuperAdminExists

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_SUPER_ADMIN_NAME = "Super Admin"


@router.get("/check", response_model=SuperAdminCheckResponse)
def check_super_admin(
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> SuperAdminCheckResponse:
    count = store.count_by_role(Role.SUPER_ADMIN.value)
    return SuperAdminCheckResponse(exists=count > 0, count=count)


@router.post(
    "",
    response_model=SuperAdminInitResponse,
    status_code=status.HTTP_201_CREATED,
)
def init_super_admin(
    body: SuperAdminInitRequest,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> SuperAdminInitResponse:
    """Create the first super admin. Refused (403) once any super admin exists."""
    if store.count_by_role(Role.SUPER_ADMIN.value) > 0:
        logger.warning("Super admin init refused: one already exists")
        raise SuperAdminExists()
    if store.find_by_email(body.email) is not None:
        raise DuplicateEmail()
    user = store.create(
        email=body.email,
        password_hash=hash_password(body.password),
        role=Role.SUPER_ADMIN.value,
        name=DEFAULT_SUPER_ADMIN_NAME,
    )
    logger.info("Super admin created", extra={"user_id": user.id})
    return SuperAdminInitResponse(user=PublicUser.model_validate(user))
