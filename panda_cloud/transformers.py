"""
Conversion between Panda JSON payloads and the data objects in models.py.

Every response body returned by the wrapped API client goes through one of
these transformers. The reverse direction produces request parameters for
API calls that take form data (profiles, notifications).
"""

import dataclasses
import json

from panda_cloud.exceptions import UnknownTransformer
from panda_cloud.models import (
    NOTIFICATION_EVENT_NAMES,
    Cloud,
    Encoding,
    NotificationEvent,
    Notifications,
    Profile,
    Video,
)


class BaseTransformer:
    """
    Field-by-field mapping between JSON objects and a dataclass model.

    Keys that name a model field are copied, anything else in the payload is
    ignored and fields missing from the payload stay None.
    """

    model = None

    # Fields the server owns; never sent back as request parameters
    read_only_fields = ('id', 'created_at', 'updated_at')

    def from_json(self, json_string):
        return self.from_object(json.loads(json_string))

    def from_json_collection(self, json_string):
        return [self.from_object(obj) for obj in json.loads(json_string)]

    def from_object(self, obj):
        instance = self.model()
        self.set_model_properties(instance, obj)
        return instance

    def set_model_properties(self, instance, obj):
        for model_field in dataclasses.fields(instance):
            if model_field.name in obj:
                setattr(instance, model_field.name, obj[model_field.name])

    def to_object(self, instance):
        return {
            model_field.name: getattr(instance, model_field.name)
            for model_field in dataclasses.fields(instance)
        }

    def to_json(self, instance):
        return json.dumps(self.to_object(instance))

    def to_request_params(self, instance):
        params = {}
        for name, value in self.to_object(instance).items():
            if name in self.read_only_fields or value is None:
                continue
            params[name] = value
        return params


class CloudTransformer(BaseTransformer):
    model = Cloud


class VideoTransformer(BaseTransformer):
    """
    Videos as returned by the Panda API.

    A video object may carry: id, created_at, updated_at, original_filename,
    extname, source_url, duration, width, height, file_size, video_bitrate,
    audio_bitrate, video_codec, audio_codec, fps, audio_channels,
    audio_sample_rate, status, mime_type and path.
    """

    model = Video


class EncodingTransformer(BaseTransformer):
    model = Encoding


class ProfileTransformer(BaseTransformer):
    model = Profile


class NotificationsTransformer(BaseTransformer):
    """
    Notifications are nested: {"url": ..., "events": {"video_created": true, ...}}.

    Only the known event names are read from and written to the wire.
    """

    model = Notifications

    def set_model_properties(self, instance, obj):
        if obj.get('url') is not None:
            instance.url = obj['url']

        events = obj.get('events') or {}
        for name in NOTIFICATION_EVENT_NAMES:
            if events.get(name) is not None:
                instance.add_notification_event(NotificationEvent(name, bool(events[name])))

    def to_object(self, instance):
        return {
            'url': instance.url,
            'events': {event.name: event.active for event in instance.get_notification_events()},
        }

    def to_request_params(self, instance):
        params = {}

        if instance.url is not None:
            params['url'] = instance.url

        for name in NOTIFICATION_EVENT_NAMES:
            event = instance.get_notification_event(name)
            if event is not None:
                params[f'events[{name}]'] = 'true' if event.active else 'false'

        return params


class TransformerRegistry:
    """Hands out one shared transformer instance per model name."""

    transformer_classes = {
        'Cloud': CloudTransformer,
        'Video': VideoTransformer,
        'Encoding': EncodingTransformer,
        'Profile': ProfileTransformer,
        'Notifications': NotificationsTransformer,
    }

    def __init__(self):
        self._instances = {}

    def get(self, name):
        if name not in self._instances:
            try:
                transformer_class = self.transformer_classes[name]
            except KeyError:
                raise UnknownTransformer(name)
            self._instances[name] = transformer_class()
        return self._instances[name]
