import json

from panda_cloud.management.base import CloudCommand


class Command(CloudCommand):
    help = 'Show the metadata Panda extracted from a video'

    def add_arguments(self, parser):
        parser.add_argument('video_id', metavar='video-id', type=str, help='Id of the video')
        parser.add_argument('--json', action='store_true', help='Output metadata as JSON')

    def handle_cloud(self, cloud, **options):
        metadata = cloud.get_video_metadata(options['video_id'])

        if options['json']:
            self.stdout.write(json.dumps(metadata, indent=2))
            return

        if not metadata:
            self.stdout.write('No metadata available.')
            return

        width = max(len(key) for key in metadata)
        for key in sorted(metadata):
            self.stdout.write(f'{key.ljust(width)}: {metadata[key]}')
