import pytest

from ytsnapshot.youtube.models import Channel, PlaylistItem, Video

def make_channel(channel_id="UC123", uploads="UU123", **extra):
    return Channel.model_validate({
        "kind": "youtube#channel",
        "id": channel_id,
        "snippet": {"title": "Test channel", "description": "about"},
        "statistics": {"subscriberCount": "42"},
        "contentDetails": {"relatedPlaylists": {"uploads": uploads}},
        **extra,
    })

def make_item(video_id):
    return PlaylistItem.model_validate({
        "kind": "youtube#playlistItem",
        "id": f"item-{video_id}",
        "contentDetails": {"videoId": video_id},
    })

def make_video(video_id, live=False):
    data = {"kind": "youtube#video", "id": video_id, "snippet": {"title": f"video {video_id}"}}
    if live:
        data["liveStreamingDetails"] = {"actualStartTime": "2026-10-18T10:00:00Z"}
    return Video.model_validate(data)

class FakeClient:
    def __init__(self, channel=None, items=(), videos=None):
        self.channel = channel
        self.items = list(items)
        # videos=None answers list_videos in request order
        self.videos = videos
        self.calls = []
        self.fail_on = None

    def _maybe_fail(self, name):
        if self.fail_on == name:
            raise RuntimeError(f"{name} failed")

    async def get_channel(self, channel_id):
        self.calls.append(("get_channel", channel_id))
        self._maybe_fail("get_channel")
        return self.channel

    async def list_playlist_items(self, playlist_id):
        self.calls.append(("list_playlist_items", playlist_id))
        self._maybe_fail("list_playlist_items")
        return self.items

    async def list_videos(self, video_ids):
        self.calls.append(("list_videos", list(video_ids)))
        self._maybe_fail("list_videos")
        if self.videos is not None:
            return self.videos
        return [make_video(v) for v in video_ids]

    async def aclose(self):
        pass

class FakeResolver:
    def __init__(self, live_id=""):
        self.live_id = live_id
        self.calls = []
        self.error = None

    async def resolve(self, channel_id):
        self.calls.append(channel_id)
        if self.error:
            raise self.error
        return self.live_id

    async def aclose(self):
        pass

@pytest.fixture
def fake_client():
    return FakeClient(channel=make_channel())

@pytest.fixture
def fake_resolver():
    return FakeResolver()
