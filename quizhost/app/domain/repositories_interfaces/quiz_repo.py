from uuid import UUID
from abc import ABC, abstractmethod
from quizhost.app.domain.entities.quiz import Quiz


class QuizRepoInterface(ABC):
    @abstractmethod
    async def create(self, date: str) -> Quiz:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, quiz_id: UUID) -> Quiz:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> list[Quiz]:
        raise NotImplementedError
