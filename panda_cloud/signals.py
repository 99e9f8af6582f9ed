"""
Signals sent when Panda reports something happened.

Receivers get the event object as the ``event`` keyword argument:

    @receiver(video_created)
    def on_video_created(sender, event, **kwargs):
        ...
"""

from django.core.signals import setting_changed
from django.dispatch import Signal, receiver

from panda_cloud.events import (
    EncodingCompletedEvent,
    EncodingProgressEvent,
    VideoCreatedEvent,
    VideoEncodedEvent,
)


video_created = Signal()
video_encoded = Signal()
encoding_progress = Signal()
encoding_completed = Signal()

SIGNALS_BY_EVENT = {
    VideoCreatedEvent: video_created,
    VideoEncodedEvent: video_encoded,
    EncodingProgressEvent: encoding_progress,
    EncodingCompletedEvent: encoding_completed,
}


def dispatch(event):
    """
    Send the signal matching an event.

    Returns:
        list of (receiver, response) pairs as returned by Signal.send()
    """
    signal = SIGNALS_BY_EVENT[type(event)]
    return signal.send(sender=type(event), event=event)


@receiver(setting_changed)
def reset_cloud_manager(sender, setting, **kwargs):
    """Rebuild the clouds after PANDA_* settings change (override_settings in tests)"""
    if setting.startswith('PANDA_'):
        from panda_cloud.manager import get_cloud_manager

        get_cloud_manager.cache_clear()
