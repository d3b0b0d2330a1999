from abc import ABC, abstractmethod
from uuid import UUID
from users_app.domain.models import User
from users_app.domain.commands import CreateUserCommand


class UserRepository(ABC):
    """
    Контракт доступа к пользователям. Ошибки сообщаются через UserRepositoryError.
    Реализации должны быть безопасны для вызова из параллельных запросов.
    """

    @abstractmethod
    def find(self, user_id: UUID) -> User:
        """Найти пользователя по id. NOT_FOUND, если такого нет."""
        ...

    @abstractmethod
    def create(self, params: CreateUserCommand) -> User:
        """Создать пользователя с новым id. INVALID_USERNAME зарезервирован под невалидное имя."""
        ...
