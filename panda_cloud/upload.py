"""
Pushing local files into Panda upload sessions.

Cloud.register_upload() returns the location of an upload session; the file
bytes are then sent there in chunks with PUT requests carrying a
Content-Range header. The session location is pre-authorized, so no request
signing happens here.
"""

import logging
from pathlib import Path

import requests

from panda_cloud.exceptions import UploadError


log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 5 * 1024 * 1024


def iter_chunks(path, chunk_size):
    """Yield (start, data) pairs covering the whole file"""
    with open(path, 'rb') as f:
        start = 0
        while True:
            data = f.read(chunk_size)
            if not data:
                break
            yield start, data
            start += len(data)


def check_upload_file(local_path):
    """
    Make sure a local file can be uploaded.

    Returns:
        The size of the file in bytes

    Raises:
        UploadError: If the file is missing or empty
    """
    local_path = Path(local_path)
    if not local_path.is_file():
        raise UploadError(f'File not found: {local_path}')

    size = local_path.stat().st_size
    if size == 0:
        raise UploadError(f'Refusing to upload empty file: {local_path}')
    return size


def push_file(location, local_path, chunk_size=DEFAULT_CHUNK_SIZE, logger=None):
    """
    Upload a local file to a registered upload session.

    Args:
        location: Upload URL returned when registering the session
        local_path: Path of the file to send (Path object or str)
        chunk_size: Number of bytes per PUT request
        logger: Optional callable(str) for progress messages

    Returns:
        The response of the last PUT request

    Raises:
        UploadError: If the file is missing or empty, or a request fails
    """

    def report(message):
        if logger:
            logger(message)

    local_path = Path(local_path)
    total = check_upload_file(local_path)

    report(f'Uploading {local_path.name} ({total:,} bytes) to {location}')

    response = None
    for start, data in iter_chunks(local_path, chunk_size):
        end = start + len(data) - 1
        headers = {
            'Content-Type': 'application/octet-stream',
            'Content-Range': f'bytes {start}-{end}/{total}',
        }
        try:
            response = requests.put(location, data=data, headers=headers, timeout=60)
            response.raise_for_status()
        except requests.RequestException as e:
            log.warning('Upload of %s failed at byte %d: %s', local_path, start, e)
            raise UploadError(f'Upload failed at byte {start}: {e}')

        if not 200 <= response.status_code < 300:
            log.warning(
                'Upload of %s got status %s at byte %d', local_path, response.status_code, start
            )
            raise UploadError(
                f'Upload failed at byte {start}: unexpected status {response.status_code}'
            )

        report(f'  Sent bytes {start}-{end} of {total}')

    report('Upload complete')
    return response
