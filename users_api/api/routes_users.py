"""Users CRUD routes."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PayloadError

from users_api.core.errors import InvalidRequestBodyError, InvalidUserIdError, UserNotFoundError
from users_api.core.validation import parse_user_id, validate_user_fields
from users_api.repositories.user_repository import UserRepository
from users_api.schemas.common import ErrorResponse
from users_api.schemas.user import UserOut, UserPayload

router = APIRouter(prefix="/users", tags=["users"])

INVALID_RESPONSES = {406: {"model": ErrorResponse}}
BODY_RESPONSES = {400: {"model": ErrorResponse}, **INVALID_RESPONSES}
MISSING_RESPONSES = {404: {"model": ErrorResponse}, **INVALID_RESPONSES}
PAYLOAD_BODY = {
    "requestBody": {
        "required": False,
        "content": {"application/json": {"schema": UserPayload.model_json_schema()}},
    }
}


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def valid_user_id(user_id: str) -> int:
    """Guard shared by every ``/users/{user_id}`` route."""
    parsed = parse_user_id(user_id)
    if parsed is None:
        raise InvalidUserIdError(user_id)
    return parsed


async def read_payload(request: Request) -> Optional[UserPayload]:
    """Decode the JSON body; an empty body means no fields were sent.

    The body is read by this dependency instead of a body parameter so that
    ``valid_user_id`` always resolves before it.
    """
    body = await request.body()
    if not body:
        return None
    try:
        return UserPayload.model_validate_json(body)
    except PayloadError as exc:
        raise InvalidRequestBodyError(str(exc)) from exc


async def read_guarded_payload(
    request: Request,
    target_id: int = Depends(valid_user_id),  # noqa: ARG001 - id guard runs first
) -> Optional[UserPayload]:
    return await read_payload(request)


@router.get("", response_model=list[UserOut])
def list_users(repo: UserRepository = Depends(get_user_repository)) -> list[UserOut]:
    return [UserOut.model_validate(user) for user in repo.list_users()]


@router.post("", response_model=UserOut, responses=BODY_RESPONSES, openapi_extra=PAYLOAD_BODY)
def create_user(
    payload: Optional[UserPayload] = Depends(read_payload),
    repo: UserRepository = Depends(get_user_repository),
) -> UserOut:
    fields = payload.supplied_fields() if payload else {}
    validate_user_fields(fields)
    created = repo.create_user(fields)
    return UserOut.model_validate(created)


@router.get("/{user_id}", response_model=UserOut, responses={404: {"description": "No such user; body is null"}, **INVALID_RESPONSES})
def get_user(
    target_id: int = Depends(valid_user_id),
    repo: UserRepository = Depends(get_user_repository),
):
    target = repo.get_user(target_id)
    if target is None:
        return JSONResponse(status_code=404, content=None)
    return UserOut.model_validate(target)


@router.put(
    "/{user_id}",
    response_model=UserOut,
    responses={**MISSING_RESPONSES, **BODY_RESPONSES},
    openapi_extra=PAYLOAD_BODY,
)
def update_user(
    target_id: int = Depends(valid_user_id),
    payload: Optional[UserPayload] = Depends(read_guarded_payload),
    repo: UserRepository = Depends(get_user_repository),
) -> UserOut:
    if not repo.user_exists(target_id):
        raise UserNotFoundError(target_id)

    changes = payload.supplied_fields() if payload else {}
    validate_user_fields(changes, partial=True)

    changed = repo.update_user(target_id, changes)
    if changed is None:
        raise UserNotFoundError(target_id)
    return UserOut.model_validate(changed)


@router.delete("/{user_id}", response_model=UserOut, responses=MISSING_RESPONSES)
def delete_user(
    target_id: int = Depends(valid_user_id),
    repo: UserRepository = Depends(get_user_repository),
) -> UserOut:
    if not repo.user_exists(target_id):
        raise UserNotFoundError(target_id)

    deleted = repo.get_user(target_id)
    if deleted is None:
        raise UserNotFoundError(target_id)
    repo.delete_user(target_id)
    return UserOut.model_validate(deleted)


@router.api_route("/{user_id}", methods=["POST", "PATCH", "HEAD", "OPTIONS"], include_in_schema=False)
def unsupported_method(target_id: int = Depends(valid_user_id)):  # noqa: ARG001 - id guard runs first
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "GET, PUT, DELETE"},
    )
