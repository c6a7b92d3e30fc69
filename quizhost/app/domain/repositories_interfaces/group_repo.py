from uuid import UUID
from abc import ABC, abstractmethod
from quizhost.app.domain.entities.group import Group
from quizhost.app.domain.entities.quiz import Quiz


class GroupRepoInterface(ABC):
    @abstractmethod
    async def signup(self, quiz_id: UUID, name: str) -> Group:
        raise NotImplementedError

    @abstractmethod
    async def join(self, quiz: Quiz, name: str) -> Group:
        raise NotImplementedError
