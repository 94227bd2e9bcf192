# core/http_client.py
import aiohttp
import asyncio
import logging
from typing import Optional
from core.config import config

log = logging.getLogger("amedos.http")

class HTTPClientManager:
    """Manages the aiohttp session used for map image downloads"""

    def __init__(self):
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock: Optional[asyncio.Lock] = None

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session"""
        if self._session is None or self._session.closed:
            # the lock has to belong to the running loop; the Lambda entry
            # point starts a fresh loop per invocation
            if self._lock is None:
                self._lock = asyncio.Lock()
            async with self._lock:
                if self._session is None or self._session.closed:
                    await self._create_session()

        return self._session

    async def _create_session(self):
        """Create new HTTP session"""
        timeout = aiohttp.ClientTimeout(total=config.http_timeout)

        headers = {
            'User-Agent': 'Amedos/1.0 (Slack slash command; rain radar)',
            'Accept': 'image/png, image/*;q=0.8, */*;q=0.5',
        }

        self._session = aiohttp.ClientSession(
            timeout=timeout,
            headers=headers,
            raise_for_status=True,  # 4xx/5xx from the map API count as fetch failures
        )

        log.info(f"Created HTTP session (timeout {config.http_timeout}s)")

    async def close(self):
        """Close HTTP session and cleanup connections"""
        if self._session and not self._session.closed:
            await self._session.close()
            log.info("HTTP session closed")
        self._session = None
        self._lock = None

    async def fetch_bytes(self, url: str, **kwargs) -> bytes:
        """GET a URL and return the raw body"""
        session = await self.get_session()
        async with session.get(url, **kwargs) as resp:
            data = await resp.read()
            log.debug(f"Fetched {len(data)} bytes ({resp.content_type})")
            return data

# Global HTTP client manager
http_client = HTTPClientManager()

async def close_http_client():
    """Close global HTTP client"""
    await http_client.close()
