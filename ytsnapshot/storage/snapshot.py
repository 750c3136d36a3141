from dataclasses import dataclass
from typing import Optional, Tuple

from ytsnapshot.youtube.models import Channel, Video

@dataclass(frozen=True)
class Snapshot:
    channel: Optional[Channel] = None
    live_video: Optional[Video] = None
    videos: Tuple[Video, ...] = ()

    def to_dict(self):
        return {
            "channel": self.channel.to_json() if self.channel else None,
            "liveVideo": self.live_video.to_json() if self.live_video else None,
            "videos": [v.to_json() for v in self.videos],
        }

class SnapshotStore:
    """Holds the one snapshot the process serves.

    Writers build a complete Snapshot and publish it in one reference swap,
    so readers see either the previous snapshot or the new one.
    """

    def __init__(self):
        self._current = Snapshot()

    def current(self) -> Snapshot:
        return self._current

    def publish(self, snapshot: Snapshot):
        self._current = snapshot
