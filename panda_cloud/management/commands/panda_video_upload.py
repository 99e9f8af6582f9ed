"""
Management command to upload a local file through an upload session.

Registers the session with Panda, then pushes the file to the returned
location in chunks (PANDA_UPLOAD_CHUNK_SIZE bytes each).
"""
from pathlib import Path

from django.core.management.base import CommandError

from panda_cloud.management.base import CloudCommand


class Command(CloudCommand):
    help = 'Upload a video file and create encodings for it'

    def add_arguments(self, parser):
        parser.add_argument('path', type=str, help='Path of the video file')
        parser.add_argument(
            '--profile',
            dest='profiles',
            action='append',
            help='Profile name to encode with (repeatable)',
        )
        parser.add_argument(
            '--all-profiles',
            action='store_true',
            help='Encode with all profiles (ignored when --profile is given)',
        )
        parser.add_argument('--verbose', action='store_true', help='Report upload progress')

    def handle_cloud(self, cloud, **options):
        path = Path(options['path'])
        if not path.is_file():
            raise CommandError(f'File not found: {path}')

        logger = self.stdout.write if options['verbose'] else None
        video_id = cloud.upload_video_file(
            path,
            profiles=options['profiles'],
            use_all_profiles=options['all_profiles'],
            logger=logger,
        )
        self.stdout.write(self.style.SUCCESS(f'Uploaded {path.name}, video id {video_id}'))
