import functools
import logging
from uuid import UUID
from aiohttp import web
from quizhost.app.domain.errors import NotFound, PersistenceError, MalformedSession
from quizhost.infrastructure.services.repo_service import RepoService
from quizhost.infrastructure.services.session_service import SessionService, HOST_COOKIE, GROUP_COOKIE


logger = logging.getLogger('handlers')

SESSION_SERVICE = web.AppKey('session_service', SessionService)
REPO_SERVICE = 'repo_service'
STORE_OPENER = 'store_opener'


def error_handler(func):
    """
    A decorator that maps the typed failures of the core to HTTP responses.

    NotFound becomes 404, MalformedSession becomes 400 and clears the
    participant cookie, PersistenceError becomes 503. Everything else,
    including aiohttp's own redirects, propagates unchanged.

    :param func: The asynchronous handler to be wrapped.
    :return: The wrapped handler.
    """
    @functools.wraps(func)
    async def wrapper(request, *args, **kwargs):
        try:
            return await func(request, *args, **kwargs)
        except NotFound as e:
            logger.info("Not found in %s: %s", func.__name__, e)
            raise web.HTTPNotFound(text=str(e))
        except MalformedSession as e:
            logger.warning("Malformed session in %s: %s", func.__name__, e)
            response = web.HTTPBadRequest(text="Your registration could not be read, please sign up again.")
            response.del_cookie(GROUP_COOKIE)
            raise response
        except PersistenceError as e:
            logger.error("Error in %s: %s", func.__name__, e, exc_info=True)
            raise web.HTTPServiceUnavailable(text="Something went wrong. Please try again later.")
    return wrapper


def host_required(func):
    @functools.wraps(func)
    async def wrapper(request, *args, **kwargs):
        if not session_service(request).is_host(request.cookies.get(HOST_COOKIE)):
            raise web.HTTPFound('/host')
        return await func(request, *args, **kwargs)
    return wrapper


def session_service(request: web.Request) -> SessionService:
    return request.app[SESSION_SERVICE]


async def repo_service(request: web.Request) -> RepoService:
    if REPO_SERVICE not in request:
        store = await request[STORE_OPENER]()
        request[REPO_SERVICE] = RepoService.for_store(store)
    return request[REPO_SERVICE]


async def read_form(request: web.Request, *names: str) -> dict:
    """
    Reads the urlencoded form of a request.

    :param request: The incoming request.
    :param names: Fields that must be present.
    :return: All submitted fields as strings.
    """
    form = await request.post()
    missing = [name for name in names if name not in form]
    if missing:
        raise web.HTTPBadRequest(text=f"Missing form field(s): {', '.join(missing)}")
    return {key: str(value) for key, value in form.items()}


def parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise NotFound(f"{value!r} is not a valid identifier")


def set_sealed_cookie(response: web.StreamResponse, name: str, value: str) -> None:
    response.set_cookie(name, value, httponly=True, samesite='Lax', path='/')
