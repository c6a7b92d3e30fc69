from quizhost.infrastructure.aiomysql_config import StoreConnection
from quizhost.infrastructure.repositories.quiz.sql_repo import MySQLQuizRepo
from quizhost.infrastructure.repositories.question.sql_repo import MySQLQuestionRepo
from quizhost.infrastructure.repositories.group.sql_repo import MySQLGroupRepo


# Repository service that holds all repositories bound to one borrowed store connection.
class RepoService:
    def __init__(self, sql_quiz_repo, sql_question_repo, sql_group_repo):
        self.sql_quiz_repo = sql_quiz_repo
        self.sql_question_repo = sql_question_repo
        self.sql_group_repo = sql_group_repo

    @classmethod
    def for_store(cls, store: StoreConnection) -> "RepoService":
        sql_quiz_repo = MySQLQuizRepo(store)
        return cls(
            sql_quiz_repo=sql_quiz_repo,
            sql_question_repo=MySQLQuestionRepo(store),
            sql_group_repo=MySQLGroupRepo(store, sql_quiz_repo),
        )
