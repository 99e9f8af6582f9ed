"""
Data objects returned by the Panda cloud facade.

These are plain records built fresh from every API response. They are not
Django models and nothing here touches the database.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional


# Notification events the Panda service knows about
EVENT_VIDEO_CREATED = 'video_created'
EVENT_VIDEO_ENCODED = 'video_encoded'
EVENT_ENCODING_PROGRESS = 'encoding_progress'
EVENT_ENCODING_COMPLETED = 'encoding_completed'

NOTIFICATION_EVENT_NAMES = [
    EVENT_VIDEO_CREATED,
    EVENT_VIDEO_ENCODED,
    EVENT_ENCODING_PROGRESS,
    EVENT_ENCODING_COMPLETED,
]


@dataclass
class Cloud:
    """A cloud (tenant) on the Panda service."""

    id: Optional[str] = None
    name: Optional[str] = None
    s3_videos_bucket: Optional[str] = None
    s3_private_access: Optional[bool] = None
    url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass
class Video:
    """A source video uploaded to a cloud."""

    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    original_filename: Optional[str] = None
    extname: Optional[str] = None
    source_url: Optional[str] = None
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None
    video_bitrate: Optional[int] = None
    audio_bitrate: Optional[int] = None
    video_codec: Optional[str] = None
    audio_codec: Optional[str] = None
    fps: Optional[float] = None
    audio_channels: Optional[int] = None
    audio_sample_rate: Optional[int] = None
    status: Optional[str] = None
    mime_type: Optional[str] = None
    path: Optional[str] = None


@dataclass
class Encoding:
    """One rendition of a video produced with a profile."""

    id: Optional[str] = None
    video_id: Optional[str] = None
    extname: Optional[str] = None
    path: Optional[str] = None
    profile_id: Optional[str] = None
    profile_name: Optional[str] = None
    status: Optional[str] = None
    encoding_progress: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    started_encoding_at: Optional[str] = None
    encoding_time: Optional[int] = None
    files: Optional[List[str]] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    error_class: Optional[str] = None
    error_message: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass
class Profile:
    """A named encoding preset."""

    id: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    preset_name: Optional[str] = None
    extname: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    upscale: Optional[bool] = None
    aspect_mode: Optional[str] = None
    two_pass: Optional[bool] = None
    video_bitrate: Optional[int] = None
    audio_bitrate: Optional[int] = None
    audio_sample_rate: Optional[int] = None
    fps: Optional[float] = None
    keyframe_interval: Optional[int] = None
    command: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass
class NotificationEvent:
    """A webhook trigger and whether it is switched on."""

    name: str
    active: bool = False


@dataclass
class Notifications:
    """
    Notification configuration of a cloud.

    Holds the callback url and the set of events, keyed by event name. Adding
    an event whose name is already present replaces the old one.
    """

    url: Optional[str] = None
    events: Dict[str, NotificationEvent] = field(default_factory=dict)

    def add_notification_event(self, event: NotificationEvent):
        self.events[event.name] = event

    def remove_notification_event(self, name: str):
        self.events.pop(name, None)

    def has_notification_event(self, name: str) -> bool:
        return name in self.events

    def get_notification_event(self, name: str) -> Optional[NotificationEvent]:
        return self.events.get(name)

    def get_notification_events(self) -> List[NotificationEvent]:
        return list(self.events.values())


@dataclass
class VideoPage:
    """One page of a paginated video listing."""

    videos: List[Video] = field(default_factory=list)
    page: int = 1
    per_page: int = 100
    total: int = 0

    @property
    def pages(self) -> int:
        """Number of pages needed to show all videos (at least one)"""
        if not self.per_page or self.total <= 0:
            return 1
        return max(1, math.ceil(self.total / self.per_page))
