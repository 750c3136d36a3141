from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

class Resource(BaseModel):
    # Upstream fields we don't model are kept so the served JSON mirrors the API record.
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    kind: Optional[str] = None
    etag: Optional[str] = None
    id: Optional[str] = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

class RelatedPlaylists(BaseModel):
    model_config = ConfigDict(extra="allow")

    uploads: Optional[str] = None

class ChannelContentDetails(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    related_playlists: Optional[RelatedPlaylists] = Field(default=None, alias="relatedPlaylists")

class Channel(Resource):
    snippet: Optional[Dict[str, Any]] = None
    statistics: Optional[Dict[str, Any]] = None
    content_details: Optional[ChannelContentDetails] = Field(default=None, alias="contentDetails")

    @property
    def uploads_playlist_id(self) -> Optional[str]:
        if self.content_details and self.content_details.related_playlists:
            return self.content_details.related_playlists.uploads
        return None

class PlaylistItemContentDetails(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    video_id: Optional[str] = Field(default=None, alias="videoId")

class PlaylistItem(Resource):
    snippet: Optional[Dict[str, Any]] = None
    content_details: Optional[PlaylistItemContentDetails] = Field(default=None, alias="contentDetails")

    @property
    def video_id(self) -> Optional[str]:
        return self.content_details.video_id if self.content_details else None

class Video(Resource):
    snippet: Optional[Dict[str, Any]] = None
    statistics: Optional[Dict[str, Any]] = None
    live_streaming_details: Optional[Dict[str, Any]] = Field(default=None, alias="liveStreamingDetails")
