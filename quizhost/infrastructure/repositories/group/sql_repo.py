import logging
from uuid import UUID
from quizhost.app.domain.repositories_interfaces.group_repo import GroupRepoInterface
from quizhost.app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from quizhost.app.domain.entities.group import Group
from quizhost.app.domain.entities.quiz import Quiz
from quizhost.app.domain.identifiers import new_id
from quizhost.infrastructure.aiomysql_config import StoreConnection


logger = logging.getLogger('repositories')


class MySQLGroupRepo(GroupRepoInterface):
    def __init__(self, store: StoreConnection, quiz_repo: QuizRepoInterface):
        self.store = store
        self.quiz_repo = quiz_repo

    async def signup(self, quiz_id: UUID, name: str) -> Group:
        # Raises NotFound before anything is written
        quiz = await self.quiz_repo.find_by_id(quiz_id)
        return await self.join(quiz, name)

    async def join(self, quiz: Quiz, name: str) -> Group:
        group = Group(id=new_id(), quiz_id=quiz.id, name=name)
        # `groups` is a reserved word in MySQL 8
        await self.store.execute(
            "INSERT INTO `groups` (id, quiz_id, name) VALUES (%s, %s, %s)",
            (str(group.id), str(group.quiz_id), group.name)
        )
        logger.debug("Stored group %s for quiz %s", group.id, quiz.id, extra={'user': group.name})
        return group
