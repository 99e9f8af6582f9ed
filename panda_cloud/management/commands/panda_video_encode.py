"""
Management command to create a video from a URL or a local file.

URLs are fetched by Panda itself, local files are sent through the wrapped
API client.
"""
from pathlib import Path

from django.core.management.base import CommandError

from panda_cloud.management.base import CloudCommand


class Command(CloudCommand):
    help = 'Encode a video available under a URL or as a local file'

    def add_arguments(self, parser):
        parser.add_argument('source', type=str, help='URL or file path of the video')

    def handle_cloud(self, cloud, **options):
        source = options['source']

        if source.startswith('http://') or source.startswith('https://'):
            video = cloud.encode_video_by_url(source)
        else:
            path = Path(source)
            if not path.is_file():
                raise CommandError(f'File not found: {source}')
            video = cloud.encode_video_file(path)

        self.stdout.write(self.style.SUCCESS(f'Created video with id {video.id}'))
        self.write_fields(video)
