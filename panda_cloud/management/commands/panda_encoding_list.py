from panda_cloud.management.base import CloudCommand
from panda_cloud.utils import format_table


class Command(CloudCommand):
    help = 'List encodings, optionally filtered'

    def add_arguments(self, parser):
        parser.add_argument(
            '--status',
            type=str,
            choices=['success', 'fail', 'processing'],
            help='Only show encodings with this status',
        )
        parser.add_argument('--profile-id', type=str, help='Only show encodings of this profile')
        parser.add_argument('--profile-name', type=str, help='Only show encodings of this profile')
        parser.add_argument('--video-id', type=str, help='Only show encodings of this video')

    def handle_cloud(self, cloud, **options):
        filter = {
            key: options[key]
            for key in ('status', 'profile_id', 'profile_name', 'video_id')
            if options.get(key)
        }
        encodings = cloud.get_encodings(filter)

        if not encodings:
            self.stdout.write('No encodings found.')
            return

        rows = [
            (e.id, e.video_id, e.profile_name, e.status, e.encoding_progress) for e in encodings
        ]
        for line in format_table(['Encoding id', 'Video id', 'Profile', 'Status', 'Progress'], rows):
            self.stdout.write(line)
