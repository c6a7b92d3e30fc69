import argparse
import asyncio
import logging
import sys
from aiohttp import web
from quizhost.app.domain.errors import ConfigurationError
from quizhost.config.main_config import Settings, load_settings
from quizhost.config.logging_config import setup_logging
from quizhost.infrastructure.aiomysql_config import MySQLPool, init_schema
from quizhost.infrastructure.services.session_service import SessionService
from quizhost.presentation.middlewares.repo_middleware import repo_middleware
from quizhost.presentation.routers import main_router, host_router, participant_router
from quizhost.presentation.utils import SESSION_SERVICE
from quizhost.presentation import handlers  # noqa: F401 Importing handlers module to register routes


logger = logging.getLogger('handlers')


def create_app(settings: Settings, pool) -> web.Application:
    """
    Builds the web application around an already configured pool.

    :param settings: Configuration loaded at startup.
    :param pool: Anything with an acquire() context manager yielding a StoreConnection.
    :return: The aiohttp application.
    """
    app = web.Application(middlewares=[repo_middleware(pool)])
    app[SESSION_SERVICE] = SessionService.from_settings(settings)
    app.add_routes(main_router)
    app.add_routes(host_router)
    app.add_routes(participant_router)
    return app


def build_app(settings: Settings) -> web.Application:
    sql_pool = MySQLPool.from_settings(settings)

    async def pool_context(app):
        await sql_pool.create_pool()
        logger.info("Connected to %s:%s/%s", settings.DB_HOST, settings.DB_PORT, settings.DB_NAME)
        yield
        await sql_pool.close_pool()

    app = create_app(settings, sql_pool)
    app.cleanup_ctx.append(pool_context)
    return app


async def initialize_database(settings: Settings) -> None:
    sql_pool = MySQLPool.from_settings(settings)
    await sql_pool.create_pool()
    try:
        async with sql_pool.acquire() as store:
            await init_schema(store)
    finally:
        await sql_pool.close_pool()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='quizhost', description='Quiz hosting service')
    parser.add_argument('--init-db', action='store_true', help='create the tables and exit')
    parser.add_argument('--env-file', default='.env', help='dotenv file to read configuration from')
    args = parser.parse_args(argv)

    try:
        settings = load_settings(env_file=args.env_file)
    except ConfigurationError as e:
        setup_logging()
        logger.critical("Refusing to start: %s", e)
        return 1

    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if args.init_db:
        asyncio.run(initialize_database(settings))
        return 0

    web.run_app(build_app(settings), host=settings.HTTP_HOST, port=settings.HTTP_PORT)
    return 0


if __name__ == '__main__':
    sys.exit(main())
