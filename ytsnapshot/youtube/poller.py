import asyncio
import enum
import logging
from typing import List, Optional, Sequence, Tuple

from .api_client import YouTubeClient
from .live_resolver import LiveVideoResolver
from .models import Video
from ytsnapshot.storage.snapshot import Snapshot, SnapshotStore
from ytsnapshot.metrics.registry import (
    refresh_duration_seconds, refresh_errors_total, last_refresh_timestamp,
    channel_live, snapshot_videos, poller_state, POLLER_STATE_CODES,
)

log = logging.getLogger(__name__)

class ChannelNotFoundError(LookupError):
    def __init__(self, channel_id: str):
        super().__init__(f"channel not found: {channel_id}")
        self.channel_id = channel_id

class RefreshInProgressError(RuntimeError):
    pass

class PollerState(str, enum.Enum):
    IDLE = 'idle'
    REFRESHING = 'refreshing'

def pick_live_video(videos: Sequence[Video], live_video_id: str) -> Tuple[Optional[Video], List[Video]]:
    """Split a videos.list response into (live video, other videos).

    The live id is requested first, and the API is assumed to answer in
    request order, so only the first item is checked. If the API reorders,
    the live video ends up among the regular uploads. A live broadcast that
    is also in the uploads playlist is dropped from the uploads.
    """
    if live_video_id and videos and videos[0].id == live_video_id:
        return videos[0], [v for v in videos[1:] if v.id != live_video_id]
    return None, list(videos)

class Poller:
    def __init__(self, client: YouTubeClient, resolver: LiveVideoResolver, store: SnapshotStore,
                 channel_id: str, interval: float = 60):
        self.client = client
        self.resolver = resolver
        self.store = store
        self.channel_id = channel_id
        self.interval = interval
        self.state = PollerState.IDLE

    def _set_state(self, state: PollerState):
        self.state = state
        poller_state.set(POLLER_STATE_CODES[state.value])

    async def refresh(self) -> Snapshot:
        if self.state is PollerState.REFRESHING:
            raise RefreshInProgressError("a refresh is already running")
        self._set_state(PollerState.REFRESHING)
        try:
            with refresh_duration_seconds.time():
                snapshot = await self._build_snapshot()
        finally:
            self._set_state(PollerState.IDLE)
        self.store.publish(snapshot)
        last_refresh_timestamp.set_to_current_time()
        channel_live.set(1 if snapshot.live_video else 0)
        snapshot_videos.set(len(snapshot.videos))
        return snapshot

    async def _build_snapshot(self) -> Snapshot:
        channel = await self.client.get_channel(self.channel_id)
        if channel is None:
            raise ChannelNotFoundError(self.channel_id)

        live_video_id = await self.resolver.resolve(channel.id)

        uploads = channel.uploads_playlist_id
        if not uploads:
            raise LookupError(f"channel {channel.id} has no uploads playlist")
        items = await self.client.list_playlist_items(uploads)

        video_ids = [live_video_id] if live_video_id else []
        video_ids.extend(i.video_id for i in items if i.video_id)

        if not video_ids:
            return Snapshot(channel=channel)

        videos = await self.client.list_videos(video_ids)
        live_video, others = pick_live_video(videos, live_video_id)
        if live_video_id and live_video is None:
            log.warning("Live video %s was not first in the videos response; treating it as not live", live_video_id)
        log.info("Refreshed channel=%s live=%s videos=%d", channel.id, live_video.id if live_video else None, len(others))
        return Snapshot(channel=channel, live_video=live_video, videos=tuple(others))

    async def run(self):
        while True:
            try:
                await self.refresh()
            except Exception:
                refresh_errors_total.inc()
                log.exception("Unable to refresh state for channel=%s", self.channel_id)
            await asyncio.sleep(self.interval)
