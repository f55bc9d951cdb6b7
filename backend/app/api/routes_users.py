"""User CRUD API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.common import ValidationProblem
from app.schemas.user import UserCreate, UserOut, UserUpdate
from app.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "No user has this id"}}
INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ValidationProblem}}


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


@router.get("", response_model=list[UserOut])
def list_users(
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> list[UserOut]:
    return user_service.list_users(db)


@router.get("/{user_id}", response_model=UserOut, responses=NOT_FOUND)
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
):
    user = user_service.get_user(db, user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED, responses=INVALID)
def create_user(
    payload: UserCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> UserOut:
    user = user_service.create_user(db, payload)
    response.headers["Location"] = str(request.url_for("get_user", user_id=str(user.id)))
    return user


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **INVALID},
)
def update_user(
    user_id: str,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> Response:
    if not user_service.update_user(db, user_id, payload):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> Response:
    if not user_service.delete_user(db, user_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
