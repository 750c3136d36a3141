from typing import List, Optional, Sequence
import httpx

from .models import Channel, PlaylistItem, Video

BASE_URL = "https://www.googleapis.com/youtube/v3"
MAX_PLAYLIST_RESULTS = 25

class YouTubeAPIError(Exception):
    """Non-2xx response from the Data API."""

    def __init__(self, status_code: int, message: str, reason: Optional[str] = None):
        super().__init__(f"YouTube API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.reason = reason

class YouTubeClient:
    def __init__(self, api_key: str, timeout: float = 10.0, http: Optional[httpx.AsyncClient] = None):
        if not api_key:
            raise ValueError("YouTube API key is required")
        self._key = api_key
        self._http = http or httpx.AsyncClient(timeout=timeout)

    async def aclose(self):
        await self._http.aclose()

    async def _list(self, resource: str, params: dict) -> list:
        r = await self._http.get(f"{BASE_URL}/{resource}", params={**params, "key": self._key})
        if r.is_error:
            raise _api_error(r)
        data = r.json()
        return data.get("items", [])

    async def get_channel(self, channel_id: str) -> Optional[Channel]:
        items = await self._list("channels", {
            "part": "contentDetails,snippet,statistics",
            "id": channel_id,
        })
        return Channel.model_validate(items[0]) if items else None

    async def list_playlist_items(self, playlist_id: str) -> List[PlaylistItem]:
        items = await self._list("playlistItems", {
            "part": "contentDetails,snippet",
            "playlistId": playlist_id,
            "maxResults": MAX_PLAYLIST_RESULTS,
        })
        return [PlaylistItem.model_validate(i) for i in items]

    async def list_videos(self, video_ids: Sequence[str]) -> List[Video]:
        if not video_ids:
            raise ValueError("list_videos needs at least one video id")
        items = await self._list("videos", {
            "part": "snippet,statistics,liveStreamingDetails",
            "id": ",".join(video_ids),
        })
        return [Video.model_validate(i) for i in items]

def _api_error(r: httpx.Response) -> YouTubeAPIError:
    message = r.reason_phrase or "request failed"
    reason = None
    try:
        err = (r.json() or {}).get("error", {})
    except (ValueError, AttributeError):
        err = {}
    if isinstance(err, dict):
        message = err.get("message") or message
        details = err.get("errors") or []
        if details and isinstance(details[0], dict):
            reason = details[0].get("reason")
    return YouTubeAPIError(r.status_code, message, reason)
