from uuid import UUID
from quizhost.app.domain.repositories_interfaces.group_repo import GroupRepoInterface
from quizhost.app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from quizhost.app.domain.entities.group import Group
from quizhost.app.domain.entities.quiz import Quiz


class GroupUseCases:
    def __init__(self, group_repo: GroupRepoInterface, quiz_repo: QuizRepoInterface):
        self.group_repo = group_repo
        self.quiz_repo = quiz_repo

    async def signup(self, quiz_id: UUID, name: str) -> tuple[Group, Quiz]:
        """
        Registers a participant group for a quiz.

        :param quiz_id: The unique identifier of the quiz to join.
        :param name: Display name chosen by the group.
        :return: The new Group and the Quiz it joined, whose code the participants are sent to.
        :raises NotFound: If the quiz does not exist. No group is stored in that case.
        """
        quiz = await self.quiz_repo.find_by_id(quiz_id)
        group = await self.group_repo.join(quiz, name)
        return group, quiz
