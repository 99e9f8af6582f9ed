from panda_cloud.management.base import CloudCommand


class Command(CloudCommand):
    help = 'Show the details of an encoding'

    def add_arguments(self, parser):
        parser.add_argument('encoding_id', metavar='encoding-id', type=str, help='Id of the encoding')

    def handle_cloud(self, cloud, **options):
        encoding = cloud.get_encoding(options['encoding_id'])
        self.stdout.write(f'Encoding {encoding.id}')
        self.write_fields(encoding)
