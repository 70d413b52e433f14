from fastapi import APIRouter

from shortener.domain.identity.entities.user import User
from shortener.infrastructure.identity.dependencies import CurrentUser
from shortener.infrastructure.identity.schemas import UserDetailsResponse

router = APIRouter(prefix="/users", tags=["users"])


def to_user_response(user: User) -> UserDetailsResponse:
    return UserDetailsResponse(
        id=user.id or "",
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email.value,
        created_at=user.created_at,
    )


@router.get("/me")
def get_me(current_user: CurrentUser) -> UserDetailsResponse:
    """Get the authenticated user's profile."""
    return to_user_response(current_user)
