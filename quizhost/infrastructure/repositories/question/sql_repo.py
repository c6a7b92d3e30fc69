import logging
from uuid import UUID
from quizhost.app.domain.repositories_interfaces.question_repo import QuestionRepoInterface
from quizhost.app.domain.entities.question import Question
from quizhost.app.domain.identifiers import new_id
from quizhost.infrastructure.aiomysql_config import StoreConnection


logger = logging.getLogger('repositories')

# Questions are always stored in the first section for now
DEFAULT_SECTION = 1


class MySQLQuestionRepo(QuestionRepoInterface):
    def __init__(self, store: StoreConnection):
        self.store = store

    async def create_for_quiz(self, quiz_id: UUID, question_text: str, answer_text: str) -> Question:
        question = Question(
            id=new_id(),
            quiz_id=quiz_id,
            question=question_text,
            answer=answer_text,
            section=DEFAULT_SECTION,
        )
        # A missing quiz is rejected by the foreign key and surfaces as PersistenceError
        await self.store.execute(
            '''INSERT INTO questions (id, quiz_id, question, answer, section) VALUES (%s, %s, %s, %s, %s)''',
            (str(question.id), str(question.quiz_id), question.question, question.answer, question.section)
        )
        logger.debug("Question %s stored for quiz %s", question.id, quiz_id)
        return question

    async def find_all_for_quiz(self, quiz_id: UUID) -> list[Question]:
        rows = await self.store.fetch_all(
            "SELECT id, quiz_id, question, answer, section FROM questions WHERE quiz_id = %s",
            (str(quiz_id),)
        )
        return [Question.from_row(row) for row in rows]
