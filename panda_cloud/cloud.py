"""
Python interface for the Panda video encoding service.

Cloud wraps one Panda API client. Every response body is passed through the
matching transformer so callers get model objects instead of JSON text.
"""

import json
import logging
from pathlib import Path

from panda_cloud.models import VideoPage
from panda_cloud.transformers import TransformerRegistry
from panda_cloud.upload import DEFAULT_CHUNK_SIZE, check_upload_file, push_file


log = logging.getLogger(__name__)


class Cloud:
    """Facade over the API client of a single Panda cloud."""

    def __init__(self, api, transformers=None, upload_chunk_size=DEFAULT_CHUNK_SIZE):
        self._api = api
        self._transformers = transformers or TransformerRegistry()
        self.upload_chunk_size = upload_chunk_size

    @property
    def api(self):
        """The wrapped API client"""
        return self._api

    def _transformer(self, name):
        return self._transformers.get(name)

    # Videos

    def get_videos(self):
        log.debug('Fetching all videos')
        return self._transformer('Video').from_json_collection(self._api.get_videos())

    def get_videos_for_pagination(self, page=1, per_page=100):
        """
        Retrieve one page of videos.

        Args:
            page: The page to fetch (1-based)
            per_page: Number of videos per page

        Returns:
            VideoPage with the videos of the page and the server's page,
            per_page and total counters
        """
        log.debug('Fetching videos page %s (%s per page)', page, per_page)
        transformer = self._transformer('Video')
        data = json.loads(self._api.get_videos_for_pagination(page, per_page))
        return VideoPage(
            videos=[transformer.from_object(video) for video in data.get('videos') or []],
            page=int(data.get('page') or page),
            per_page=int(data.get('per_page') or per_page),
            total=int(data.get('total') or 0),
        )

    def get_video(self, video_id):
        return self._transformer('Video').from_json(self._api.get_video(video_id))

    def get_video_metadata(self, video_id):
        """Fetch the metadata Panda extracted from a video as a dict"""
        return json.loads(self._api.get_video_metadata(video_id))

    def delete_video(self, video):
        log.debug('Deleting video %s', video.id)
        return self._api.delete_video(video.id)

    def encode_video_by_url(self, url):
        """Ask Panda to fetch the video at url and encode it"""
        log.debug('Encoding video from %s', url)
        return self._transformer('Video').from_json(self._api.encode_video_by_url(url))

    def encode_video_file(self, local_path):
        log.debug('Encoding local file %s', local_path)
        return self._transformer('Video').from_json(self._api.encode_video_file(str(local_path)))

    def register_upload(self, filename, filesize, profiles=None, use_all_profiles=False):
        """
        Register an upload session for a file.

        Args:
            filename: Name of the file being transferred
            filesize: Size of the file in bytes
            profiles: Profile names to create encodings for (none by default)
            use_all_profiles: Create encodings for all profiles; only used
                when profiles is None

        Returns:
            dict with the id of the video after uploading and the location
            the file has to be pushed to
        """
        response = self._api.register_upload(filename, filesize, profiles, use_all_profiles)
        return json.loads(response)

    def upload_video_file(self, local_path, profiles=None, use_all_profiles=False, logger=None):
        """
        Register an upload session for a local file and push the file to it.

        Returns:
            The id of the created video

        Raises:
            UploadError: If the file is missing or empty; nothing is registered then
        """
        local_path = Path(local_path)
        size = check_upload_file(local_path)
        session = self.register_upload(local_path.name, size, profiles, use_all_profiles)
        log.info('Registered upload session %s for %s', session.get('id'), local_path)
        push_file(session['location'], local_path, self.upload_chunk_size, logger=logger)
        return session.get('id')

    # Encodings

    def get_encodings(self, filter=None):
        """
        Fetch encodings, optionally filtered.

        Supported filter keys: status ('success', 'fail' or 'processing'),
        profile_id, profile_name and video_id.
        """
        response = self._api.get_encodings(dict(filter or {}))
        return self._transformer('Encoding').from_json_collection(response)

    def get_encodings_with_status(self, status, filter=None):
        return self.get_encodings(dict(filter or {}, status=status))

    def get_encodings_for_profile(self, profile_id, filter=None):
        return self.get_encodings(dict(filter or {}, profile_id=profile_id))

    def get_encodings_for_profile_by_name(self, profile_name, filter=None):
        return self.get_encodings(dict(filter or {}, profile_name=profile_name))

    def get_encodings_for_video(self, video_id, filter=None):
        return self.get_encodings(dict(filter or {}, video_id=video_id))

    def get_encoding(self, encoding_id):
        return self._transformer('Encoding').from_json(self._api.get_encoding(encoding_id))

    def create_encoding(self, video, profile):
        return self.create_encoding_with_profile_id(video, profile.id)

    def create_encoding_with_profile_id(self, video, profile_id):
        log.debug('Creating encoding of video %s with profile %s', video.id, profile_id)
        response = self._api.create_encoding(video.id, profile_id)
        return self._transformer('Encoding').from_json(response)

    def create_encoding_with_profile_name(self, video, profile_name):
        log.debug('Creating encoding of video %s with profile "%s"', video.id, profile_name)
        response = self._api.create_encoding_with_profile_name(video.id, profile_name)
        return self._transformer('Encoding').from_json(response)

    def cancel_encoding(self, encoding):
        log.debug('Canceling encoding %s', encoding.id)
        return self._api.cancel_encoding(encoding.id)

    def retry_encoding(self, encoding):
        log.debug('Retrying encoding %s', encoding.id)
        return self._api.retry_encoding(encoding.id)

    def delete_encoding(self, encoding):
        log.debug('Deleting encoding %s', encoding.id)
        return self._api.delete_encoding(encoding.id)

    # Profiles

    def get_profiles(self):
        return self._transformer('Profile').from_json_collection(self._api.get_profiles())

    def get_profile(self, profile_id):
        return self._transformer('Profile').from_json(self._api.get_profile(profile_id))

    def add_profile(self, profile):
        transformer = self._transformer('Profile')
        response = self._api.add_profile(transformer.to_request_params(profile))
        return transformer.from_json(response)

    def add_profile_from_preset(self, preset_name):
        response = self._api.add_profile_from_preset(preset_name)
        return self._transformer('Profile').from_json(response)

    def set_profile(self, profile):
        transformer = self._transformer('Profile')
        response = self._api.set_profile(profile.id, transformer.to_request_params(profile))
        return transformer.from_json(response)

    def delete_profile(self, profile):
        log.debug('Deleting profile %s', profile.id)
        return self._api.delete_profile(profile.id)

    # Cloud

    def get_cloud_data(self):
        """Fetch the data of the cloud the API client is bound to"""
        response = self._api.get_cloud(self._api.cloud_id)
        return self._transformer('Cloud').from_json(response)

    def set_cloud(self, cloud_id, data):
        """
        Change cloud data.

        Returns:
            The Cloud with the changes applied
        """
        response = self._api.set_cloud(cloud_id, dict(data))
        return self._transformer('Cloud').from_json(response)

    # Notifications

    def get_notifications(self):
        return self._transformer('Notifications').from_json(self._api.get_notifications())

    def set_notifications(self, notifications):
        transformer = self._transformer('Notifications')
        response = self._api.set_notifications(transformer.to_request_params(notifications))
        return transformer.from_json(response)
