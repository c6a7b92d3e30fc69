import logging
from aiohttp import web
from quizhost.app.use_cases.quizzes.quiz_use_cases import QuizUseCases
from quizhost.infrastructure.services.session_service import HOST_COOKIE
from quizhost.presentation.routers import host_router
from quizhost.presentation.utils import (error_handler, host_required, read_form, parse_uuid,
                                         repo_service, session_service, set_sealed_cookie)


logger = logging.getLogger('handlers')


async def quiz_use_cases(request) -> QuizUseCases:
    repos = await repo_service(request)
    return QuizUseCases(quiz_repo=repos.sql_quiz_repo, question_repo=repos.sql_question_repo)


@host_router.post('/host/authenticate')
@error_handler
async def authenticate(request):
    form = await read_form(request, 'password')
    cookie = session_service(request).authenticate(form['password'])

    response = web.HTTPFound('/host')
    if cookie:
        logger.info("HOST AUTHENTICATED", extra={'user': 'host'})
        set_sealed_cookie(response, HOST_COOKIE, cookie)
    else:
        logger.info("HOST AUTHENTICATION FAILED", extra={'user': request.remote})
    raise response


@host_router.get('/host')
@error_handler
async def host_dashboard(request):
    if not session_service(request).is_host(request.cookies.get(HOST_COOKIE)):
        return web.json_response({'authenticated': False, 'quizzes': []})

    quiz_uc = await quiz_use_cases(request)
    quizzes = await quiz_uc.dashboard()
    logger.debug("Dashboard lists %s quizzes", len(quizzes), extra={'user': 'host'})
    return web.json_response({
        'authenticated': True,
        'quizzes': [quiz.model_dump(mode='json') for quiz in quizzes],
    })


@host_router.post('/host/create_quiz')
@error_handler
@host_required
async def create_quiz(request):
    form = await read_form(request, 'date')
    quiz_uc = await quiz_use_cases(request)
    quiz = await quiz_uc.create(form['date'])
    logger.info("QUIZ CREATED %s", quiz.id, extra={'user': 'host'})
    raise web.HTTPFound('/host')


@host_router.get('/host/quiz/{quiz_id}')
@error_handler
@host_required
async def view_quiz_as_host(request):
    quiz_id = parse_uuid(request.match_info['quiz_id'])
    quiz_uc = await quiz_use_cases(request)
    quiz, questions = await quiz_uc.get_with_questions(quiz_id)
    return web.json_response({
        'uuid': str(quiz.id),
        'quiz': quiz.model_dump(mode='json'),
        'questions': [question.model_dump(mode='json') for question in questions],
    })


@host_router.post('/host/quiz/{quiz_id}/questions')
@error_handler
@host_required
async def add_question_to_quiz(request):
    quiz_id = parse_uuid(request.match_info['quiz_id'])
    form = await read_form(request, 'question', 'answer')

    section = form.get('section')
    if section is not None:
        try:
            int(section)
        except ValueError:
            raise web.HTTPBadRequest(text="section must be a number")

    # The submitted section is accepted but every question is stored in section 1
    quiz_uc = await quiz_use_cases(request)
    question = await quiz_uc.add_question(quiz_id, form['question'], form['answer'])
    logger.info("QUESTION CREATED %s (section submitted: %s, stored: %s)",
                question.id, section, question.section, extra={'user': 'host'})
    raise web.HTTPFound(f'/host/quiz/{quiz_id}')
