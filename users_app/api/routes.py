from typing import Union
from uuid import UUID

from fastapi import APIRouter, Depends

from users_app.schemas.user import CreateUserIn, ErrorOut, UserOut, ValidationErrorOut
from users_app.application.orchestrator import CommandBus
from users_app.domain.commands import CreateUserCommand, FindUserCommand
from users_app.api.dependencies import get_command_bus, get_request_id

router = APIRouter(tags=["users"])


@router.get(
    "/users/{user_id}",
    response_model=UserOut,
    responses={404: {"model": ErrorOut}, 400: {"model": ValidationErrorOut}},
)
def users_show(user_id: UUID, bus: CommandBus = Depends(get_command_bus), request_id: str = Depends(get_request_id)):
    user = bus.execute(FindUserCommand(user_id=user_id), request_id=request_id)
    return UserOut.from_domain(user)


@router.post(
    "/users",
    response_model=UserOut,
    responses={
        400: {"model": Union[ValidationErrorOut, ErrorOut], "description": "Malformed JSON body or invalid username"},
        422: {"model": ValidationErrorOut},
    },
)
def users_create(payload: CreateUserIn, bus: CommandBus = Depends(get_command_bus), request_id: str = Depends(get_request_id)):
    user = bus.execute(CreateUserCommand(username=payload.username), request_id=request_id)
    return UserOut.from_domain(user)
