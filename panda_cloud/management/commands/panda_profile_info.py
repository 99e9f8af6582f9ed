from panda_cloud.management.base import CloudCommand


class Command(CloudCommand):
    help = 'Show the details of a profile'

    def add_arguments(self, parser):
        parser.add_argument('profile_id', metavar='profile-id', type=str, help='Id of the profile')

    def handle_cloud(self, cloud, **options):
        profile = cloud.get_profile(options['profile_id'])
        self.stdout.write(f'Profile {profile.name} ({profile.id})')
        self.write_fields(profile)
