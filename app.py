# app.py
import importlib
import logging
import sys

from aiohttp import web
from dotenv import load_dotenv
from slack_bolt.async_app import AsyncApp

from core.config import config
from core.http_client import close_http_client
from logclient import setup_logging

log = logging.getLogger("amedos")

COMMANDS = ["commands.amedos"]


def create_app() -> AsyncApp:
    """Build the bolt app and register every slash command module"""
    app = AsyncApp(
        token=config.slack_bot_token,
        signing_secret=config.slack_signing_secret,
    )

    @app.error
    async def global_error_handler(error, body):
        log.error(f"Unhandled error for {body.get('command') or body.get('type')}: {error}", exc_info=error)

    dispatchers = []
    for ext in COMMANDS:
        try:
            module = importlib.import_module(ext)
            dispatchers.append(module.setup(app))
            log.info(f"✅ Loaded command module {ext}")
        except Exception as e:
            log.exception(f"❌ Failed to load command module {ext}: {e}")
    app.dispatchers = dispatchers
    return app


def create_web_app(app: AsyncApp, webhook_handler=None) -> web.Application:
    """aiohttp application serving /slack/events, with startup/shutdown hooks"""
    web_app = app.web_app(path="/slack/events", port=config.port)

    async def on_startup(_):
        if webhook_handler:
            await webhook_handler.start_webhook_worker()
            log.info("✅ Webhook logger started")

    async def on_cleanup(_):
        log.info("🔄 Shutting down...")
        for dispatcher in app.dispatchers:
            drain = getattr(dispatcher, "drain", None)
            if drain:
                await drain()
        await close_http_client()
        if webhook_handler:
            await webhook_handler.stop_webhook_worker()

    web_app.on_startup.append(on_startup)
    web_app.on_cleanup.append(on_cleanup)
    return web_app


def main():
    load_dotenv()
    webhook_handler = setup_logging(config.log_level, config.log_dir, config.log_webhook_url)
    try:
        config.validate()
    except ValueError:
        sys.exit(1)
    config.log_configuration()

    app = create_app()
    web.run_app(create_web_app(app, webhook_handler), port=config.port)


if __name__ == "__main__":
    main()
