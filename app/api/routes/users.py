from fastapi import APIRouter, Depends, status

from app.api.deps import get_user_repository
from app.core.errors import ConflictError, conflict_from_violation
from app.domain.schemas import UserCreate, UserResponse
from app.repositories.user import UserRepository
from database.memory import UniqueViolationError

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, users: UserRepository = Depends(get_user_repository)):
    """Create a legacy user account. Not tied to any customer."""
    if users.get_by_username(data.username):
        raise ConflictError("Username already exists")

    try:
        user = users.create(username=data.username, password=data.password)
    except UniqueViolationError as e:
        raise conflict_from_violation(e) from e
    return UserResponse(**user)
