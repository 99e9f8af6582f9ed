from panda_cloud.management.base import CloudCommand
from panda_cloud.models import Profile


class Command(CloudCommand):
    help = 'Delete a profile'

    def add_arguments(self, parser):
        parser.add_argument('profile_id', metavar='profile-id', type=str, help='Id of the profile')

    def handle_cloud(self, cloud, **options):
        profile_id = options['profile_id']
        cloud.delete_profile(Profile(id=profile_id))
        self.stdout.write(self.style.SUCCESS(f'Successfully deleted profile with id {profile_id}'))
