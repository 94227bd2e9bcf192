"""Yahoo! JAPAN static map URLs with the rainfall overlay."""

import datetime
from typing import Optional

from core.config import config
from core.timezone_util import format_radar_timestamp

STATIC_MAP_ENDPOINT = "https://map.yahooapis.jp/map/V1/static"
ZOOM_LEVEL = 10


def build_image_url(
    lat: float,
    lon: float,
    width: int,
    height: int,
    moment: datetime.datetime,
    *,
    app_id: Optional[str] = None,
    mode: Optional[str] = None,
) -> str:
    """
    Compose the static map request for a rain-radar snapshot.

    The overlay date must be Japan local time at minute precision, otherwise
    the API quietly serves a stale or blank overlay instead of failing.
    The query is assembled by hand: the overlay value keeps its literal
    ``|`` and ``:`` separators.
    """
    if app_id is None:
        app_id = config.yahoo_app_id
    if mode is None:
        mode = config.yahoo_map_mode
    overlay = f"type:rainfall|datelabel:on|date:{format_radar_timestamp(moment)}"
    return (
        f"{STATIC_MAP_ENDPOINT}?appid={app_id}&z={ZOOM_LEVEL}"
        f"&lat={lat}&lon={lon}&width={width}&height={height}"
        f"&mode={mode}&overlay={overlay}"
    )
