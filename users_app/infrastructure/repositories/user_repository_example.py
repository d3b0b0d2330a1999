import logging
import uuid
from users_app.domain.interfaces import UserRepository
from users_app.domain.models import User
from users_app.domain.commands import CreateUserCommand
from users_app.domain.errors import UserRepoErrorKind, UserRepositoryError


class ExampleUserRepository(UserRepository):
    """
    In-memory заглушка: ничего не хранит, данные синтезируются на каждый вызов.
    Правило поиска произвольное и нужно только для демонстрации.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._log = (logger or logging.getLogger(__name__)).getChild("ExampleUserRepository")

    def find(self, user_id: uuid.UUID) -> User:
        self._log.debug("finding user %s", user_id)
        # id, начинающиеся с "a", считаются отсутствующими
        if str(user_id).startswith("a"):
            raise UserRepositoryError(UserRepoErrorKind.NOT_FOUND)
        return User(id=user_id, username="example")

    def create(self, params: CreateUserCommand) -> User:
        # params.username пока игнорируется
        return User(id=uuid.uuid4(), username="new example")
