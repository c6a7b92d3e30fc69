from uuid import uuid4

import pytest

from quizhost.app.domain.errors import NotFound
from quizhost.app.use_cases.groups.group_use_cases import GroupUseCases
from quizhost.app.use_cases.quizzes.quiz_use_cases import QuizUseCases


@pytest.fixture
def quiz_uc(quiz_repo, question_repo):
    return QuizUseCases(quiz_repo=quiz_repo, question_repo=question_repo)


@pytest.fixture
def group_uc(group_repo, quiz_repo):
    return GroupUseCases(group_repo=group_repo, quiz_repo=quiz_repo)


async def test_quiz_with_questions(quiz_uc):
    quiz = await quiz_uc.create('2024-05-01')
    question = await quiz_uc.add_question(quiz.id, '2+2?', '4')

    loaded, questions = await quiz_uc.get_with_questions(quiz.id)

    assert loaded == quiz
    assert questions == [question]
    assert await quiz_uc.dashboard() == [quiz]


async def test_quiz_with_questions_unknown_quiz(quiz_uc):
    with pytest.raises(NotFound):
        await quiz_uc.get_with_questions(uuid4())


async def test_group_signup_returns_joined_quiz(quiz_uc, group_uc):
    quiz = await quiz_uc.create('2024-05-01')

    group, joined = await group_uc.signup(quiz.id, 'Team A')

    assert joined == quiz
    assert group.quiz_id == quiz.id


async def test_group_signup_looks_quiz_up_once(quiz_uc, group_uc, store):
    quiz = await quiz_uc.create('2024-05-01')
    statements_before = len(store.statements)

    await group_uc.signup(quiz.id, 'Team A')

    queries = [query for query, _ in store.statements[statements_before:]]
    assert sum('FROM quizzes' in query for query in queries) == 1
    assert sum('INSERT INTO `groups`' in query for query in queries) == 1


async def test_group_signup_unknown_quiz_writes_nothing(group_uc, store):
    with pytest.raises(NotFound):
        await group_uc.signup(uuid4(), 'Team A')
    assert store.tables['groups'] == []
