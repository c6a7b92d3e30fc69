import logging
from uuid import UUID
from quizhost.app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from quizhost.app.domain.entities.quiz import Quiz
from quizhost.app.domain.identifiers import new_id, new_quiz_code
from quizhost.app.domain.errors import NotFound
from quizhost.infrastructure.aiomysql_config import StoreConnection


logger = logging.getLogger('repositories')


class MySQLQuizRepo(QuizRepoInterface):
    def __init__(self, store: StoreConnection):
        self.store = store

    async def create(self, date: str) -> Quiz:
        quiz = Quiz(id=new_id(), quiz_code=new_quiz_code(), date=date)
        await self.store.execute(
            "INSERT INTO quizzes (id, quiz_code, date) VALUES (%s, %s, %s)",
            (str(quiz.id), quiz.quiz_code, quiz.date)
        )
        logger.debug("Quiz %s was created with code %s", quiz.id, quiz.quiz_code)
        return quiz

    async def find_by_id(self, quiz_id: UUID) -> Quiz:
        rows = await self.store.fetch_all(
            "SELECT id, quiz_code, date FROM quizzes WHERE id = %s LIMIT 1", (str(quiz_id),)
        )
        if not rows:
            raise NotFound(f"Quiz {quiz_id} does not exist")
        return Quiz.from_row(rows[0])

    async def list_all(self) -> list[Quiz]:
        rows = await self.store.fetch_all("SELECT id, quiz_code, date FROM quizzes")
        return [Quiz.from_row(row) for row in rows]
