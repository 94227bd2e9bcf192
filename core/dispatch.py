# core/dispatch.py
"""Hand-off of radar operations from the slash command to the backend."""

import asyncio
import logging
from typing import Set

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from core.backend import fetch_image_and_upload
from core.errors import DispatchError
from core.payload import DispatchReceipt, OperationPayload

log = logging.getLogger("amedos.dispatch")


class InlineDispatcher:
    """Runs the backend in this process (local development)"""

    mode = "inline"

    def __init__(self, operation=fetch_image_and_upload):
        self.operation = operation
        self._tasks: Set[asyncio.Task] = set()

    async def submit(self, payload: OperationPayload) -> DispatchReceipt:
        task = asyncio.create_task(self._run(payload))
        # the loop only keeps weak references to tasks
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return DispatchReceipt(mode=self.mode, accepted=True)

    async def _run(self, payload: OperationPayload):
        result = await self.operation(payload)
        log.info(f"Inline operation for {payload.pref_name} finished: {result.status.value}")
        return result

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self):
        """Wait for every scheduled operation; used on shutdown"""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


class LambdaDispatcher:
    """Fires an asynchronous ("Event") Lambda invocation of the backend function"""

    mode = "lambda"
    ACCEPTED_STATUS = 202

    def __init__(self, function_name: str, client=None):
        self.function_name = function_name
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("lambda")
        return self._client

    def _invoke(self, **kwargs):
        # runs in a worker thread; building the client loads botocore models and credentials
        return self.client.invoke(**kwargs)

    async def submit(self, payload: OperationPayload) -> DispatchReceipt:
        try:
            response = await asyncio.to_thread(
                self._invoke,
                FunctionName=self.function_name,
                InvocationType="Event",
                Payload=payload.to_json().encode("utf-8"),
            )
        except (BotoCoreError, ClientError) as e:
            raise DispatchError(f"Invoking {self.function_name} failed: {e}") from e

        status = response.get("StatusCode")
        log.info(f"Invoked {self.function_name}: status {status}, "
                 f"request {response.get('ResponseMetadata', {}).get('RequestId')}")
        if status != self.ACCEPTED_STATUS:
            raise DispatchError(f"Invocation of {self.function_name} not accepted (status {status})")
        return DispatchReceipt(mode=self.mode, accepted=True, status_code=status, target=self.function_name)


def create_dispatcher(config):
    """Inline dispatch when running offline, Lambda otherwise"""
    if config.is_offline:
        return InlineDispatcher()
    return LambdaDispatcher(config.backend_function_name)
