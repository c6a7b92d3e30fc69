from uuid import UUID
from abc import ABC, abstractmethod
from quizhost.app.domain.entities.question import Question


class QuestionRepoInterface(ABC):
    @abstractmethod
    async def create_for_quiz(self, quiz_id: UUID, question_text: str, answer_text: str) -> Question:
        raise NotImplementedError

    @abstractmethod
    async def find_all_for_quiz(self, quiz_id: UUID) -> list[Question]:
        raise NotImplementedError
