from panda_cloud.management.base import CloudCommand


class Command(CloudCommand):
    help = 'Show the data of a cloud'

    def handle_cloud(self, cloud, **options):
        data = cloud.get_cloud_data()
        self.stdout.write(f'Cloud {data.name} ({data.id})')
        self.write_fields(data)
