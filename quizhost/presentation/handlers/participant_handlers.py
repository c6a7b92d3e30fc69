import logging
from aiohttp import web
from quizhost.app.use_cases.groups.group_use_cases import GroupUseCases
from quizhost.infrastructure.services.session_service import GROUP_COOKIE
from quizhost.presentation.routers import participant_router
from quizhost.presentation.utils import (error_handler, read_form, parse_uuid,
                                         repo_service, session_service, set_sealed_cookie)


logger = logging.getLogger('handlers')


@participant_router.post('/quiz/{quiz_id}/signup')
@error_handler
async def signup(request):
    quiz_id = parse_uuid(request.match_info['quiz_id'])
    form = await read_form(request, 'name')

    repos = await repo_service(request)
    group_uc = GroupUseCases(group_repo=repos.sql_group_repo, quiz_repo=repos.sql_quiz_repo)
    group, quiz = await group_uc.signup(quiz_id, form['name'])

    logger.info("GROUP SIGNED UP for quiz %s", quiz.id, extra={'user': group.name})
    response = web.HTTPFound(f'/quiz/{quiz.quiz_code}')
    set_sealed_cookie(response, GROUP_COOKIE, session_service(request).group_cookie(group))
    raise response


@participant_router.get(r'/quiz/{quiz_code:\d+}')
@error_handler
async def quiz_landing(request):
    quiz_code = int(request.match_info['quiz_code'])
    token = request.cookies.get(GROUP_COOKIE)
    if not token:
        return web.json_response({'quiz_code': quiz_code, 'registered': False})

    # The cookie is the participant's whole identity, the store is not consulted
    group = session_service(request).registered_group(token)
    return web.json_response({
        'quiz_code': quiz_code,
        'registered': True,
        'group': group.model_dump(mode='json'),
    })
