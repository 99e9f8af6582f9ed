"""
Helpers shared by the panda_cloud tests.

FakeApi is the PANDA_API_FACTORY of testproject.settings.
"""

import json
from unittest.mock import Mock

from panda_cloud.api import ApiInterface
from panda_cloud.cloud import Cloud


CLOUD_JSON = {
    'id': 'default-cloud-id',
    'name': 'my_first_cloud',
    's3_videos_bucket': 'panda-videos',
    's3_private_access': False,
    'url': 'http://panda-videos.s3.amazonaws.com/',
    'created_at': '2012/12/24 10:11:12 +0000',
    'updated_at': '2013/01/02 13:14:15 +0000',
}

VIDEO_JSON = {
    'id': 'd891d9a45c698d587831466f236c6c6c',
    'created_at': '2013/01/02 10:20:30 +0000',
    'updated_at': '2013/01/02 10:21:40 +0000',
    'original_filename': 'panda.mp4',
    'extname': '.mp4',
    'source_url': 'http://example.com/panda.mp4',
    'duration': 14010,
    'width': 300,
    'height': 240,
    'file_size': 805301,
    'video_bitrate': 344,
    'audio_bitrate': 112,
    'video_codec': 'h264',
    'audio_codec': 'aac',
    'fps': 29.97,
    'audio_channels': 2,
    'audio_sample_rate': 44100,
    'status': 'success',
    'mime_type': 'video/mp4',
    'path': 'd891d9a45c698d587831466f236c6c6c',
}

ENCODING_JSON = {
    'id': '2f8760b7e0d4c7dbe609b5872be9bc3b',
    'video_id': 'd891d9a45c698d587831466f236c6c6c',
    'extname': '.mp4',
    'path': '2f8760b7e0d4c7dbe609b5872be9bc3b',
    'profile_id': '40d9f8711d64aaa74f88462e9274f39a',
    'profile_name': 'h264',
    'status': 'processing',
    'encoding_progress': 42,
    'width': 300,
    'height': 240,
    'started_encoding_at': '2013/01/02 10:22:00 +0000',
    'encoding_time': 9,
    'files': ['2f8760b7e0d4c7dbe609b5872be9bc3b.mp4'],
    'mime_type': 'video/mp4',
    'file_size': 550293,
    'error_class': None,
    'error_message': None,
    'created_at': '2013/01/02 10:21:50 +0000',
    'updated_at': '2013/01/02 10:22:10 +0000',
}

PROFILE_JSON = {
    'id': '40d9f8711d64aaa74f88462e9274f39a',
    'name': 'h264',
    'title': 'MP4 (H.264)',
    'preset_name': 'h264',
    'extname': '.mp4',
    'width': 480,
    'height': 320,
    'upscale': True,
    'aspect_mode': 'letterbox',
    'two_pass': False,
    'video_bitrate': 500,
    'audio_bitrate': 128,
    'audio_sample_rate': 44100,
    'fps': 29.97,
    'keyframe_interval': 250,
    'command': None,
    'created_at': '2012/12/24 10:11:12 +0000',
    'updated_at': '2012/12/24 10:11:12 +0000',
}

NOTIFICATIONS_JSON = {
    'url': 'http://example.com/panda/notify/',
    'events': {
        'video_created': False,
        'video_encoded': True,
        'encoding_progress': False,
        'encoding_completed': True,
    },
}


class FakeApi:
    """API client stand-in recording how the factory built it."""

    def __init__(self, cloud_id, access_key, secret_key, api_host, api_port):
        self.cloud_id = cloud_id
        self.access_key = access_key
        self.secret_key = secret_key
        self.api_host = api_host
        self.api_port = api_port

    def get_cloud(self, cloud_id):
        return json.dumps(dict(CLOUD_JSON, id=cloud_id))


def create_api_mock(cloud_id='default-cloud-id'):
    api = Mock(spec=ApiInterface)
    api.cloud_id = cloud_id
    return api


def create_cloud_mock():
    return Mock(spec=Cloud)
