# Amedos core
"""
Prefecture lookup, map URLs, payloads and the backend operation.

Usage:
    from core import resolve, build_image_url
    from core.timezone_util import get_japan_time

    pref = resolve("osaka")
    url = build_image_url(pref.lat, pref.lon, 400, 300, get_japan_time())
"""

from core.prefectures import Prefecture, resolve
from core.yahoo_map import build_image_url

__all__ = ['Prefecture', 'resolve', 'build_image_url']
