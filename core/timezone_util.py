"""
Timezone utility module for the radar snapshot timestamps.

Yahoo's rainfall overlay is indexed by Japan local time, so every timestamp
that ends up in a map URL goes through here.
"""

import datetime
import pytz

JAPAN_TZ = pytz.timezone("Asia/Tokyo")
RADAR_TIMESTAMP_FORMAT = "%Y%m%d%H%M"


def get_japan_time() -> datetime.datetime:
    return datetime.datetime.now(JAPAN_TZ)


def to_japan_timezone(dt: datetime.datetime) -> datetime.datetime:
    """Naive datetimes are taken to be UTC."""
    if dt.tzinfo is None:
        dt = pytz.UTC.localize(dt)
    return dt.astimezone(JAPAN_TZ)


def format_radar_timestamp(dt: datetime.datetime = None) -> str:
    """Render an instant as the 12-digit YYYYMMDDHHmm label in Japan time."""
    if dt is None:
        dt = get_japan_time()
    return to_japan_timezone(dt).strftime(RADAR_TIMESTAMP_FORMAT)
