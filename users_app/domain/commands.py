from dataclasses import dataclass
from uuid import UUID


class Command:
    """Базовый класс для команд (маркер)."""
    pass


@dataclass
class CreateUserCommand(Command):
    username: str


@dataclass
class FindUserCommand(Command):
    user_id: UUID
