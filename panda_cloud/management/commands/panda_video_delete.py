from panda_cloud.management.base import CloudCommand
from panda_cloud.models import Video


class Command(CloudCommand):
    help = 'Delete a video'

    def add_arguments(self, parser):
        parser.add_argument('video_id', metavar='video-id', type=str, help='Id of the video')

    def handle_cloud(self, cloud, **options):
        video_id = options['video_id']
        cloud.delete_video(Video(id=video_id))
        self.stdout.write(self.style.SUCCESS(f'Successfully deleted video with id {video_id}'))
