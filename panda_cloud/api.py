"""
Contract for the wrapped Panda API client.

The HTTP transport and request signing live in the client; this app only
calls it. The host project points PANDA_API_FACTORY at a callable that
builds one client per configured cloud.
"""

from typing import Any, Dict, List, Optional, Protocol


class ApiInterface(Protocol):
    """
    Methods the cloud facade calls on the wrapped client.

    Every method returns the raw JSON response body as a string. Failures
    should be raised as panda_cloud.exceptions.ApiError.
    """

    cloud_id: str

    def get_videos(self) -> str: ...

    def get_videos_for_pagination(self, page: int, per_page: int) -> str: ...

    def get_video(self, video_id: str) -> str: ...

    def get_video_metadata(self, video_id: str) -> str: ...

    def delete_video(self, video_id: str) -> str: ...

    def encode_video_by_url(self, url: str) -> str: ...

    def encode_video_file(self, local_path: str) -> str: ...

    def register_upload(
        self,
        filename: str,
        filesize: int,
        profiles: Optional[List[str]] = None,
        use_all_profiles: bool = False,
    ) -> str: ...

    def get_encodings(self, filter: Dict[str, Any]) -> str: ...

    def get_encoding(self, encoding_id: str) -> str: ...

    def create_encoding(self, video_id: str, profile_id: str) -> str: ...

    def create_encoding_with_profile_name(self, video_id: str, profile_name: str) -> str: ...

    def cancel_encoding(self, encoding_id: str) -> str: ...

    def retry_encoding(self, encoding_id: str) -> str: ...

    def delete_encoding(self, encoding_id: str) -> str: ...

    def get_profiles(self) -> str: ...

    def get_profile(self, profile_id: str) -> str: ...

    def add_profile(self, data: Dict[str, Any]) -> str: ...

    def add_profile_from_preset(self, preset_name: str) -> str: ...

    def set_profile(self, profile_id: str, data: Dict[str, Any]) -> str: ...

    def delete_profile(self, profile_id: str) -> str: ...

    def get_cloud(self, cloud_id: str) -> str: ...

    def set_cloud(self, cloud_id: str, data: Dict[str, Any]) -> str: ...

    def get_notifications(self) -> str: ...

    def set_notifications(self, data: Dict[str, Any]) -> str: ...
