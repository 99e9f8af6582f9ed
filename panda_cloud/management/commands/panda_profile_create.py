from panda_cloud.management.base import CloudCommand


class Command(CloudCommand):
    help = 'Create a profile from a preset'

    def add_arguments(self, parser):
        parser.add_argument('preset', type=str, help='Name of the preset, e.g. h264 or webm')

    def handle_cloud(self, cloud, **options):
        profile = cloud.add_profile_from_preset(options['preset'])
        self.stdout.write(self.style.SUCCESS(f'Created profile {profile.name} with id {profile.id}'))
