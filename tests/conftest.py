import re
from contextlib import asynccontextmanager

import pytest

from quizhost.app.domain.errors import PersistenceError
from quizhost.config.main_config import Settings
from quizhost.infrastructure.repositories.group.sql_repo import MySQLGroupRepo
from quizhost.infrastructure.repositories.question.sql_repo import MySQLQuestionRepo
from quizhost.infrastructure.repositories.quiz.sql_repo import MySQLQuizRepo
from quizhost.infrastructure.services.session_service import SessionService
from quizhost.presentation.server import create_app


HOST_PASSWORD = 's3cret'

INSERT_RE = re.compile(r"INSERT INTO `?(\w+)`?\s*\(([^)]*)\)\s*VALUES", re.IGNORECASE)
SELECT_RE = re.compile(r"SELECT (.+?) FROM `?(\w+)`?(?: WHERE (\w+) = %s)?", re.IGNORECASE)


class FakeStore:
    """In-memory stand-in for StoreConnection with primary and foreign key checks."""
    def __init__(self):
        self.tables = {'quizzes': [], 'questions': [], 'groups': []}
        self.statements = []
        self.fail = False

    async def execute(self, query, params=()):
        self.statements.append((query, params))
        if self.fail:
            raise PersistenceError("Lost connection to MySQL server during query")
        match = INSERT_RE.search(query)
        table = match.group(1)
        columns = [column.strip() for column in match.group(2).split(',')]
        row = dict(zip(columns, params))
        if any(existing['id'] == row['id'] for existing in self.tables[table]):
            raise PersistenceError(f"Duplicate entry '{row['id']}' for key 'PRIMARY'")
        if 'quiz_id' in row and not any(quiz['id'] == row['quiz_id'] for quiz in self.tables['quizzes']):
            raise PersistenceError("Cannot add or update a child row: a foreign key constraint fails")
        self.tables[table].append(row)
        return 1

    async def fetch_all(self, query, params=()):
        self.statements.append((query, params))
        if self.fail:
            raise PersistenceError("Lost connection to MySQL server during query")
        match = SELECT_RE.search(query)
        columns = [column.strip() for column in match.group(1).split(',')]
        rows = self.tables[match.group(2)]
        if match.group(3):
            rows = [row for row in rows if row[match.group(3)] == params[0]]
        return [tuple(row[column] for column in columns) for row in rows]


class FakePool:
    def __init__(self, store):
        self.store = store
        self.acquired = 0
        self.released = 0

    @asynccontextmanager
    async def acquire(self):
        self.acquired += 1
        try:
            yield self.store
        finally:
            self.released += 1


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def pool(store):
    return FakePool(store)


@pytest.fixture
def quiz_repo(store):
    return MySQLQuizRepo(store)


@pytest.fixture
def question_repo(store):
    return MySQLQuestionRepo(store)


@pytest.fixture
def group_repo(store, quiz_repo):
    return MySQLGroupRepo(store, quiz_repo)


@pytest.fixture
def settings():
    return Settings(_env_file=None, HOST_PASSWORD=HOST_PASSWORD, COOKIE_SECRET='cookie-secret-for-tests')


@pytest.fixture
def session_service(settings):
    return SessionService.from_settings(settings)


@pytest.fixture
async def client(aiohttp_client, settings, pool):
    return await aiohttp_client(create_app(settings, pool))
