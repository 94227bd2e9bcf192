"""
Data passed between the slash command frontend and the backend operation.
Uses dataclasses for type safety and easy serialization.
"""

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Optional
import json

from core.errors import PayloadError


@dataclass(frozen=True)
class OperationPayload:
    """
    Everything the backend needs to fetch one radar image and post it.

    The payload may be executed in another process (a Lambda invocation),
    so it carries the bot token itself rather than relying on app state.
    ``file`` is filled in by the backend after the fetch and never travels
    over the wire.
    """
    token: str
    image_url: str
    response_url: str
    channel_id: str
    pref_name: str
    pref_kanji_name: str
    file: Optional[bytes] = None

    # dataclass field -> wire key
    WIRE_KEYS = MappingProxyType({
        "token": "token",
        "image_url": "yahooImageUrl",
        "response_url": "responseUrl",
        "channel_id": "channelId",
        "pref_name": "prefName",
        "pref_kanji_name": "prefKanjiName",
    })

    def with_file(self, data: bytes) -> "OperationPayload":
        return replace(self, file=data)

    def to_dict(self) -> Dict[str, str]:
        return {wire: getattr(self, name) for name, wire in self.WIRE_KEYS.items()}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Any) -> "OperationPayload":
        if not isinstance(data, dict):
            raise PayloadError(f"Payload must be a JSON object, got {type(data).__name__}")
        missing = [wire for wire in cls.WIRE_KEYS.values() if not data.get(wire)]
        if missing:
            raise PayloadError(f"Payload is missing {', '.join(missing)}")
        wrong_type = [wire for wire in cls.WIRE_KEYS.values() if not isinstance(data[wire], str)]
        if wrong_type:
            raise PayloadError(f"Payload fields must be strings: {', '.join(wrong_type)}")
        return cls(**{name: data[wire] for name, wire in cls.WIRE_KEYS.items()})

    @classmethod
    def from_json(cls, body: str) -> "OperationPayload":
        try:
            data = json.loads(body)
        except ValueError as e:
            raise PayloadError(f"Payload is not valid JSON: {e}") from e
        return cls.from_dict(data)

    def __repr__(self) -> str:
        # keep the bot token and the response URL out of logs
        size = len(self.file) if self.file is not None else None
        return (
            f"OperationPayload(pref_name={self.pref_name!r}, channel_id={self.channel_id!r}, "
            f"file_bytes={size})"
        )


class OperationStatus(Enum):
    UPLOADED = "uploaded"
    FETCH_FAILED = "fetch_failed"
    UPLOAD_FAILED = "upload_failed"
    NOTIFY_FAILED = "notify_failed"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one fetch-and-upload run."""
    status: OperationStatus
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.UPLOADED


@dataclass(frozen=True)
class DispatchReceipt:
    """Acceptance of a backend hand-off; says nothing about the upload itself."""
    mode: str
    accepted: bool
    status_code: Optional[int] = None
    target: Optional[str] = None
