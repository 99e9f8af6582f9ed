from django.core.management.base import CommandError

from panda_cloud.management.base import CloudCommand
from panda_cloud.models import Video


class Command(CloudCommand):
    help = 'Create an encoding of a video'

    def add_arguments(self, parser):
        parser.add_argument('video_id', metavar='video-id', type=str, help='Id of the video')
        profile = parser.add_mutually_exclusive_group()
        profile.add_argument('--profile-id', type=str, help='Id of the profile to encode with')
        profile.add_argument('--profile-name', type=str, help='Name of the profile to encode with')

    def handle_cloud(self, cloud, **options):
        video = Video(id=options['video_id'])
        profile_id = options['profile_id']
        profile_name = options['profile_name']

        if profile_id:
            encoding = cloud.create_encoding_with_profile_id(video, profile_id)
        elif profile_name:
            encoding = cloud.create_encoding_with_profile_name(video, profile_name)
        else:
            raise CommandError('Either --profile-id or --profile-name is required')

        self.stdout.write(self.style.SUCCESS(f'Created encoding with id {encoding.id}'))
        self.write_fields(encoding)
