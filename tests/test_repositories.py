from uuid import UUID, uuid4

import pytest

from quizhost.app.domain.entities.group import Group
from quizhost.app.domain.errors import NotFound, PersistenceError


async def test_create_quiz_persists_row(quiz_repo, store):
    quiz = await quiz_repo.create('2024-05-01')

    assert isinstance(quiz.id, UUID)
    assert 1000 <= quiz.quiz_code <= 9999
    assert quiz.date == '2024-05-01'
    assert store.tables['quizzes'] == [
        {'id': str(quiz.id), 'quiz_code': quiz.quiz_code, 'date': '2024-05-01'}
    ]


async def test_create_quiz_generates_distinct_ids(quiz_repo):
    quizzes = [await quiz_repo.create('2024-05-01') for _ in range(200)]
    assert len({quiz.id for quiz in quizzes}) == 200
    assert all(1000 <= quiz.quiz_code <= 9999 for quiz in quizzes)


async def test_statements_use_bound_parameters(quiz_repo, store):
    await quiz_repo.create("2024'); DROP TABLE quizzes; --")
    query, params = store.statements[-1]
    assert 'DROP' not in query
    assert "2024'); DROP TABLE quizzes; --" in params


async def test_create_quiz_surfaces_store_failure(quiz_repo, store):
    store.fail = True
    with pytest.raises(PersistenceError):
        await quiz_repo.create('2024-05-01')


async def test_find_by_id_returns_stored_quiz(quiz_repo):
    quiz = await quiz_repo.create('2024-05-01')
    assert await quiz_repo.find_by_id(quiz.id) == quiz


async def test_find_by_id_unknown_raises_not_found(quiz_repo):
    await quiz_repo.create('2024-05-01')
    with pytest.raises(NotFound):
        await quiz_repo.find_by_id(uuid4())


async def test_list_all_returns_every_quiz(quiz_repo):
    assert await quiz_repo.list_all() == []
    first = await quiz_repo.create('2024-05-01')
    second = await quiz_repo.create('2024-06-01')
    assert await quiz_repo.list_all() == [first, second]


async def test_question_scenario_forces_first_section(quiz_repo, question_repo):
    quiz = await quiz_repo.create('2024-05-01')

    question = await question_repo.create_for_quiz(quiz.id, '2+2?', '4')

    assert question.quiz_id == quiz.id
    assert question.section == 1
    assert question.question == '2+2?'
    assert question.answer == '4'
    assert await question_repo.find_all_for_quiz(quiz.id) == [question]


async def test_find_all_for_quiz_only_returns_own_questions(quiz_repo, question_repo):
    quiz_a = await quiz_repo.create('2024-05-01')
    quiz_b = await quiz_repo.create('2024-05-02')
    created_a = [await question_repo.create_for_quiz(quiz_a.id, f'A{i}?', str(i)) for i in range(3)]
    created_b = [await question_repo.create_for_quiz(quiz_b.id, f'B{i}?', str(i)) for i in range(2)]

    found_a = await question_repo.find_all_for_quiz(quiz_a.id)
    found_b = await question_repo.find_all_for_quiz(quiz_b.id)

    assert {q.id for q in found_a} == {q.id for q in created_a}
    assert {q.id for q in found_b} == {q.id for q in created_b}
    assert await question_repo.find_all_for_quiz(uuid4()) == []


async def test_question_for_unknown_quiz_is_rejected_by_store(question_repo, store):
    with pytest.raises(PersistenceError):
        await question_repo.create_for_quiz(uuid4(), '2+2?', '4')
    assert store.tables['questions'] == []


async def test_signup_persists_group(quiz_repo, group_repo, store):
    quiz = await quiz_repo.create('2024-05-01')

    group = await group_repo.signup(quiz.id, 'Team A')

    assert group.quiz_id == quiz.id
    assert group.name == 'Team A'
    assert store.tables['groups'] == [
        {'id': str(group.id), 'quiz_id': str(quiz.id), 'name': 'Team A'}
    ]


async def test_signup_unknown_quiz_writes_nothing(quiz_repo, group_repo, store):
    await quiz_repo.create('2024-05-01')

    with pytest.raises(NotFound):
        await group_repo.signup(uuid4(), 'Team A')

    assert store.tables['groups'] == []
    assert not any('groups' in query for query, _ in store.statements)


async def test_signed_up_group_survives_serialization(quiz_repo, group_repo):
    quiz = await quiz_repo.create('2024-05-01')
    groups = [await group_repo.signup(quiz.id, name) for name in ('Team A', 'Team A', 'Ω')]

    for group in groups:
        assert Group.deserialize(group.serialize()) == group
    assert len({group.id for group in groups}) == 3


async def test_join_stores_group_for_loaded_quiz(quiz_repo, group_repo, store):
    quiz = await quiz_repo.create('2024-05-01')
    statements_before = len(store.statements)

    group = await group_repo.join(quiz, 'Team A')

    assert group.quiz_id == quiz.id
    assert len(store.statements) == statements_before + 1
    assert store.tables['groups'][0]['id'] == str(group.id)


async def test_long_free_form_date_is_kept(quiz_repo):
    date = 'Saturday the first of May, 2024, right after the football match ' * 5
    quiz = await quiz_repo.create(date)
    assert (await quiz_repo.find_by_id(quiz.id)).date == date
