# handler.py
"""AWS Lambda entry point for the backend half of the radar command."""

import asyncio
import json
import logging

from dotenv import load_dotenv

from core.backend import fetch_image_and_upload
from core.config import config
from core.errors import PayloadError
from core.http_client import close_http_client
from core.payload import OperationPayload
from logclient import setup_logging

load_dotenv()
setup_logging(config.log_level, file_logging=False)
log = logging.getLogger("amedos.handler")

DONE_RESPONSE = {
    "statusCode": 200,
    "body": json.dumps({"message": "done"}),
}


async def _run(payload: OperationPayload):
    try:
        return await fetch_image_and_upload(payload)
    finally:
        await close_http_client()


def backend_operation(event, context):
    """
    Invoked asynchronously by the frontend with an OperationPayload as event.
    Always reports success: the invocation ran, whatever became of the upload.
    """
    try:
        payload = OperationPayload.from_dict(event)
    except PayloadError as e:
        log.error(f"Rejected backend event: {e}")
        return dict(DONE_RESPONSE)

    result = asyncio.run(_run(payload))
    log.info(f"Backend operation for {payload.pref_name} finished: {result.status.value}"
             + (f" ({result.error})" if result.error else ""))
    return dict(DONE_RESPONSE)
