from uuid import UUID
from quizhost.app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from quizhost.app.domain.repositories_interfaces.question_repo import QuestionRepoInterface
from quizhost.app.domain.entities.quiz import Quiz
from quizhost.app.domain.entities.question import Question


class QuizUseCases:
    def __init__(self, quiz_repo: QuizRepoInterface, question_repo: QuestionRepoInterface):
        self.quiz_repo = quiz_repo
        self.question_repo = question_repo

    async def create(self, date: str) -> Quiz:
        """
        Creates a new quiz for the given date.

        :param date: Date of the quiz as entered by the host.
        :return: The stored Quiz with its generated id and code.
        """
        return await self.quiz_repo.create(date)

    async def dashboard(self) -> list[Quiz]:
        """
        Lists every quiz for the host dashboard.

        :return: All stored quizzes in store order.
        """
        return await self.quiz_repo.list_all()

    async def get_with_questions(self, quiz_id: UUID) -> tuple[Quiz, list[Question]]:
        """
        Loads a quiz together with all of its questions.

        :param quiz_id: The unique identifier of the quiz.
        :return: The Quiz and its questions.
        :raises NotFound: If the quiz does not exist.
        """
        quiz = await self.quiz_repo.find_by_id(quiz_id)
        questions = await self.question_repo.find_all_for_quiz(quiz.id)
        return quiz, questions

    async def add_question(self, quiz_id: UUID, question: str, answer: str) -> Question:
        """
        Appends a question to an existing quiz.

        :param quiz_id: The unique identifier of the quiz.
        :param question: The question text.
        :param answer: The answer text.
        :return: The stored Question.
        :raises PersistenceError: If the insert fails, e.g. the quiz does not exist.
        """
        return await self.question_repo.create_for_quiz(quiz_id, question, answer)
