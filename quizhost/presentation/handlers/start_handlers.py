from aiohttp import web
from quizhost.presentation.routers import main_router


@main_router.get('/')
async def index(request):
    return web.json_response({
        'service': 'quizhost',
        'host': '/host',
        'signup': '/quiz/{quiz_id}/signup',
    })
