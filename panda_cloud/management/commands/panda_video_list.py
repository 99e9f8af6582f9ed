from panda_cloud.management.base import CloudCommand
from panda_cloud.utils import format_table


class Command(CloudCommand):
    help = 'List the videos of a cloud page by page'

    def add_arguments(self, parser):
        parser.add_argument('--page', type=int, default=1, help='The page to show (default: 1)')
        parser.add_argument(
            '--per-page', type=int, default=10, help='Number of videos per page (default: 10)'
        )

    def handle_cloud(self, cloud, **options):
        result = cloud.get_videos_for_pagination(options['page'], options['per_page'])

        self.stdout.write(f'Page {result.page} of {result.pages}')
        self.stdout.write(f'Total number of videos: {result.total}')

        rows = [(video.id, video.status) for video in result.videos]
        for line in format_table(['Video id', 'Status'], rows):
            self.stdout.write(line)
