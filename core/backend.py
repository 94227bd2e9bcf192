# core/backend.py
"""
The slow half of the radar command: download the map image and post it.

Runs either as an asyncio task next to the Slack app or inside a Lambda
invocation, so it only works from its payload. Every failure ends in a log
line or a notice to the command's response URL; nothing is raised to the
caller and nothing is retried.
"""

import logging
import mimetypes
from typing import Callable, Optional

from slack_sdk.web.async_client import AsyncWebClient
from slack_sdk.webhook.async_client import AsyncWebhookClient

from core.errors import serialize_error
from core.http_client import http_client
from core.payload import OperationPayload, OperationResult, OperationStatus
from logclient import log_json

log = logging.getLogger("amedos.backend")

IMAGE_FILETYPE = "image/png"
FAILURE_MESSAGE = "Failed to post an image file - {error}"


def upload_filename(pref_name: str) -> str:
    return f"amedos_{pref_name}{mimetypes.guess_extension(IMAGE_FILETYPE) or '.png'}"


def upload_title(pref_kanji_name: str) -> str:
    return f"{pref_kanji_name}付近の現在の雨雲レーダーを表示しています"


async def fetch_image_and_upload(
    payload: OperationPayload,
    *,
    http=None,
    slack_client: Optional[AsyncWebClient] = None,
    webhook_factory: Callable[[str], AsyncWebhookClient] = AsyncWebhookClient,
) -> OperationResult:
    """Fetch the radar image for ``payload`` and upload it to its channel."""
    http = http or http_client
    try:
        image = await http.fetch_bytes(payload.image_url)
    except Exception as e:
        error = serialize_error(e)
        log.warning(f"Radar image fetch failed for {payload.pref_name}: {error}")
        return await _notify_failure(payload, error, webhook_factory)

    return await _upload_image(payload.with_file(image), slack_client)


async def _upload_image(payload: OperationPayload, slack_client: Optional[AsyncWebClient]) -> OperationResult:
    client = slack_client or AsyncWebClient(token=payload.token)
    try:
        response = await client.files_upload_v2(
            file=payload.file,
            filename=upload_filename(payload.pref_name),
            title=upload_title(payload.pref_kanji_name),
            channel=payload.channel_id,
        )
    except Exception as e:
        # the user gets no signal here, there is nowhere left to report to
        error = serialize_error(e)
        log.error(f"Upload to channel {payload.channel_id} failed: {error}")
        return OperationResult(OperationStatus.UPLOAD_FAILED, error)

    log_json(log, response)
    log.info(f"Uploaded radar image for {payload.pref_name} ({len(payload.file)} bytes) to {payload.channel_id}")
    return OperationResult(OperationStatus.UPLOADED)


async def _notify_failure(
    payload: OperationPayload,
    error: str,
    webhook_factory: Callable[[str], AsyncWebhookClient],
) -> OperationResult:
    try:
        response = await webhook_factory(payload.response_url).send(
            text=FAILURE_MESSAGE.format(error=error)
        )
    except Exception as e:
        log.error(f"Failure notice could not be delivered: {serialize_error(e)}")
        return OperationResult(OperationStatus.NOTIFY_FAILED, error)

    log_json(log, {"status_code": response.status_code, "body": response.body})
    if response.status_code != 200:
        log.error(f"Failure notice rejected with status {response.status_code}: {response.body}")
        return OperationResult(OperationStatus.NOTIFY_FAILED, error)
    return OperationResult(OperationStatus.FETCH_FAILED, error)
