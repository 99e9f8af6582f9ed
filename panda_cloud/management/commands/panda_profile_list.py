from panda_cloud.management.base import CloudCommand
from panda_cloud.utils import format_table


class Command(CloudCommand):
    help = 'List the encoding profiles'

    def handle_cloud(self, cloud, **options):
        profiles = cloud.get_profiles()

        if not profiles:
            self.stdout.write('No profiles found.')
            return

        rows = [(p.id, p.name, p.title, p.preset_name) for p in profiles]
        for line in format_table(['Profile id', 'Name', 'Title', 'Preset'], rows):
            self.stdout.write(line)
