import logging
import re
from typing import Optional

import httpx
from bs4 import BeautifulSoup

log = logging.getLogger(__name__)

LIVE_PAGE_URL = "https://www.youtube.com/channel/{channel_id}/live"
# Skips the EU consent interstitial that otherwise replaces the live page.
CONSENT_COOKIE = ("CONSENT", "YES+42")
WATCH_URL_RE = re.compile(r"https://www\.youtube\.com/watch\?v=(.+)", re.IGNORECASE)

def extract_live_video_id(html: str) -> str:
    """Return the video id from the page's canonical watch link, or "" when there is none."""
    soup = BeautifulSoup(html, "html.parser")
    link = soup.select_one("link[rel='canonical']")
    if link is None:
        return ""
    href = link.get("href") or ""
    m = WATCH_URL_RE.search(href)
    return m.group(1) if m else ""

class LiveVideoResolver:
    def __init__(self, timeout: float = 10.0, http: Optional[httpx.AsyncClient] = None):
        self._http = http or httpx.AsyncClient(timeout=timeout)
        name, value = CONSENT_COOKIE
        self._http.cookies.set(name, value, domain=".youtube.com")

    async def aclose(self):
        await self._http.aclose()

    async def resolve(self, channel_id: str) -> str:
        url = LIVE_PAGE_URL.format(channel_id=channel_id)
        # The status code is not checked: a non-live channel still serves a page, just without a watch link.
        r = await self._http.get(url)
        video_id = extract_live_video_id(r.text)
        log.debug("Live page %s status=%s live_video_id=%r", url, r.status_code, video_id)
        return video_id
