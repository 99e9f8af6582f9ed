from panda_cloud.management.base import CloudCommand
from panda_cloud.models import Encoding


class Command(CloudCommand):
    help = 'Retry a failed encoding'

    def add_arguments(self, parser):
        parser.add_argument('encoding_id', metavar='encoding-id', type=str, help='Id of the encoding')

    def handle_cloud(self, cloud, **options):
        encoding_id = options['encoding_id']
        cloud.retry_encoding(Encoding(id=encoding_id))
        self.stdout.write(self.style.SUCCESS(f'Successfully restarted encoding with id {encoding_id}'))
