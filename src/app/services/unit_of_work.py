from abc import ABC, abstractmethod

from src.app.repositories.center_repository import ICenterRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    Transaction boundary for one use case.

    Usage:
        async with uow:
            user = await uow.users.get_by_email(email)
            ...
            await uow.commit()

    Anything not committed before the block exits is rolled back.
    """

    users: IUserRepository
    centers: ICenterRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
