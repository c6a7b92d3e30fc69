from contextlib import AsyncExitStack
from aiohttp import web
from quizhost.presentation.utils import STORE_OPENER, error_handler


def repo_middleware(pool):
    # A connection is borrowed only once a handler asks for repositories,
    # and given back when the request is done
    @web.middleware
    @error_handler
    async def middleware(request, handler):
        async with AsyncExitStack() as stack:
            request[STORE_OPENER] = lambda: stack.enter_async_context(pool.acquire())
            return await handler(request)
    return middleware
