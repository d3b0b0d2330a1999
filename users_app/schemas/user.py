from typing import List
from uuid import UUID
from pydantic import BaseModel

from users_app.domain.models import User


class CreateUserIn(BaseModel):
    username: str


class UserOut(BaseModel):
    id: UUID
    username: str

    @classmethod
    def from_domain(cls, user: User) -> "UserOut":
        return cls(id=user.id, username=user.username)


class ErrorOut(BaseModel):
    error: str


class FieldErrorOut(BaseModel):
    field: str
    message: str
    type: str


class ValidationErrorOut(ErrorOut):
    details: List[FieldErrorOut]
