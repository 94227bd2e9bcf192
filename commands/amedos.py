"""/amedos slash command: show the current rain radar around a prefecture."""

import datetime
import logging
from typing import Optional

from core.config import config
from core.dispatch import create_dispatcher
from core.errors import DispatchError
from core.payload import OperationPayload
from core.prefectures import DEFAULT_PREFECTURE, resolve
from core.timezone_util import get_japan_time
from core.yahoo_map import build_image_url

log = logging.getLogger("amedos.commands")

IMAGE_WIDTH = 400
IMAGE_HEIGHT = 300
DISPATCH_FAILED_TEXT = "Sorry, the rain radar request could not be started. Please try again later."


def parse_prefecture_name(command_text: Optional[str]) -> str:
    """First whitespace-separated word, lowercased; Tokyo when there is none."""
    inputs = (command_text or "").lower().split()
    return inputs[0] if inputs else DEFAULT_PREFECTURE


def build_payload(
    command_text: Optional[str],
    token: str,
    channel_id: str,
    response_url: str,
    now: Optional[datetime.datetime] = None,
) -> OperationPayload:
    pref_name = parse_prefecture_name(command_text)
    prefecture = resolve(pref_name)
    image_url = build_image_url(
        prefecture.lat,
        prefecture.lon,
        IMAGE_WIDTH,
        IMAGE_HEIGHT,
        now or get_japan_time(),
    )
    return OperationPayload(
        token=token,
        image_url=image_url,
        response_url=response_url,
        channel_id=channel_id,
        pref_name=pref_name,
        pref_kanji_name=prefecture.kanji_name,
    )


async def handle_command(ack, command: dict, context, dispatcher):
    """Acknowledge at once and leave the image to the backend."""
    payload = build_payload(
        command.get("text"),
        getattr(context, "bot_token", None) or config.slack_bot_token,
        command["channel_id"],
        command["response_url"],
    )
    log.info(f"/{config.slash_command_name} from {command.get('user_id')} in {payload.channel_id}: "
             f"{payload.pref_name} -> {payload.pref_kanji_name}")

    try:
        receipt = await dispatcher.submit(payload)
    except DispatchError as e:
        log.error(f"Dispatch failed: {e}", exc_info=True)
        await ack(text=DISPATCH_FAILED_TEXT)
        return None

    log.debug(f"Dispatch receipt: {receipt}")
    await ack()
    return receipt


def setup(app, dispatcher=None):
    """Register the slash command listener on a bolt AsyncApp"""
    dispatcher = dispatcher or create_dispatcher(config)

    @app.command(f"/{config.slash_command_name}")
    async def amedos_command(ack, command, context):
        await handle_command(ack, command, context, dispatcher)

    log.info(f"Registered /{config.slash_command_name} ({dispatcher.mode} dispatch)")
    return dispatcher
