"""
User-related endpoints.

Provides the current user's record for the client session coordinator.
"""

from fastapi import APIRouter

from shared.models import UserRecord
from ..middleware.auth import RequireUser
from ..models.errors import ErrorResponse

router = APIRouter()


@router.get(
    "/me",
    response_model=UserRecord,
    # Forward only what the users service sent; no defaults filled in
    response_model_exclude_unset=True,
    responses={401: {"model": ErrorResponse}},
)
async def get_current_user_record(
    user: UserRecord = RequireUser,
) -> UserRecord:
    """
    Get the current user's record from the users service.

    Requires a valid session cookie.
    """
    return user
