"""
Events announced by Panda notification callbacks.

The notify view turns each callback into one of these objects and hands it
to signals.dispatch().
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class VideoCreatedEvent:
    """A video was successfully created."""

    name = 'panda.video_created'

    video_id: str
    encoding_ids: List[str] = field(default_factory=list)


@dataclass
class VideoEncodedEvent:
    """All encodings of a video are finished."""

    name = 'panda.video_encoded'

    video_id: str
    encoding_ids: List[str] = field(default_factory=list)


@dataclass
class EncodingProgressEvent:
    """Progress of an encoding changed."""

    name = 'panda.encoding_progress'

    encoding_id: str
    progress: int = 0


@dataclass
class EncodingCompletedEvent:
    """An encoding is finished."""

    name = 'panda.encoding_completed'

    encoding_id: str
