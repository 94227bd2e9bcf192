import asyncio
import json
import logging
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

import aiohttp

LOG_FORMAT  = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "amedos.log"

logger = logging.getLogger("amedos")


# ─── Webhook Log Handler ────────────────────────────────────────────────────
class SlackWebhookLogHandler(logging.Handler):
    """Logging handler that forwards records to a Slack incoming webhook"""

    def __init__(self, webhook_url: str, level=logging.WARNING):
        super().__init__(level)
        self.webhook_url = webhook_url
        self.session: Optional[aiohttp.ClientSession] = None
        self.queue: Optional[asyncio.Queue] = None
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self.task: Optional[asyncio.Task] = None
        self.emoji_map = {
            'DEBUG': ':mag:',
            'INFO': ':information_source:',
            'WARNING': ':warning:',
            'ERROR': ':x:',
            'CRITICAL': ':rotating_light:'
        }

    async def start_webhook_worker(self):
        """Start the webhook worker task on the running loop"""
        self.loop = asyncio.get_running_loop()
        if self.queue is None:
            self.queue = asyncio.Queue()
        if not self.session or self.session.closed:
            self.session = aiohttp.ClientSession()
        if not self.task or self.task.done():
            self.task = asyncio.create_task(self._webhook_worker())

    async def stop_webhook_worker(self):
        """Stop the webhook worker and clean up"""
        if self.task and not self.task.done():
            self.task.cancel()
            try:
                await self.task
            except asyncio.CancelledError:
                pass
        if self.session and not self.session.closed:
            await self.session.close()
        self.loop = None

    def emit(self, record):
        """Queue the record; dropped when no worker loop is running"""
        if self.loop is None or self.queue is None or self.loop.is_closed():
            return
        try:
            self.loop.call_soon_threadsafe(self.queue.put_nowait, record)
        except RuntimeError:
            # loop shut down between the check and the call
            pass

    def build_message(self, record) -> dict:
        text = self.format(record)
        emoji = self.emoji_map.get(record.levelname, ':memo:')
        blocks = [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"{emoji} *{record.levelname}* - `{record.name}`"}
            },
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"```{text[:2800]}```"}
            },
            {
                "type": "context",
                "elements": [{"type": "mrkdwn", "text": f"{record.funcName}:{record.lineno}"}]
            },
        ]
        if record.exc_info:
            exc_text = ''.join(traceback.format_exception(*record.exc_info))
            blocks.append({
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"```{exc_text[:2800]}{'...' if len(exc_text) > 2800 else ''}```"}
            })
        return {"text": f"{record.levelname} {record.name}: {record.getMessage()[:200]}", "blocks": blocks}

    async def _webhook_worker(self):
        """Worker that processes the log queue and sends webhooks"""
        while True:
            record = await self.queue.get()
            await self._send_webhook(record)

    async def _send_webhook(self, record):
        try:
            if not self.session or self.session.closed:
                self.session = aiohttp.ClientSession()
            async with self.session.post(self.webhook_url, json=self.build_message(record)) as resp:
                if resp.status != 200:
                    print(f"Log webhook failed with status {resp.status}")
        except Exception as e:
            # never log from here, the record would come straight back
            print(f"Error sending log webhook: {e}")


# ─── Setup ──────────────────────────────────────────────────────────────────
def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    webhook_url: Optional[str] = None,
    file_logging: bool = True,
) -> Optional[SlackWebhookLogHandler]:
    """Configure console/file logging; returns the webhook handler if one was installed"""
    handlers = [logging.StreamHandler()]
    if file_logging:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(Path(log_dir) / LOG_FILE_NAME, maxBytes=5*1024*1024, backupCount=3, encoding="utf-8")
        )

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    webhook_handler = None
    if webhook_url:
        webhook_handler = SlackWebhookLogHandler(webhook_url)
        webhook_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(webhook_handler)
    return webhook_handler


def log_json(log: logging.Logger, obj: Any, level: int = logging.INFO):
    """Log an opaque API result as a single JSON line"""
    data = getattr(obj, "data", obj)
    log.log(level, json.dumps(data, ensure_ascii=False, default=str))
