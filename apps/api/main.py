import asyncio

import uvicorn  # type: ignore

from config.config import Config, load_config
from internal.api import create_app
from pkg.logger.logger import LoggerConfig
from apps.dependencies import close_dependencies, init_dependencies


def build_server_config(app, app_config: Config) -> uvicorn.Config:
    """uvicorn config for the app. Log level spellings are normalized first (WARN -> warning)."""
    level = "DEBUG" if app_config.logging.debug else app_config.logging.level
    return uvicorn.Config(
        app,
        host=app_config.api.host,
        port=app_config.api.port,
        log_level=LoggerConfig(level=level).level.value.lower(),
    )


async def main():
    """Main entry point for the API service.

    Clients are connected before the server starts accepting requests and
    disconnected after it stops.
    """
    app_config = load_config()
    deps = await init_dependencies(app_config)
    logger = deps.logger

    try:
        app = create_app(deps)
        server = uvicorn.Server(build_server_config(app, app_config))
        # uvicorn installs its own SIGINT/SIGTERM handlers
        await server.serve()
    except Exception as e:
        logger.error(f"API server failed: {e}")
        logger.exception("API server error:")
        raise
    finally:
        await close_dependencies(deps)


def run():
    """Entry point for console script."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown complete")


if __name__ == "__main__":
    run()
