from django.core.management.base import CommandError

from panda_cloud.management.base import CloudCommand


class Command(CloudCommand):
    help = 'Change the name or storage settings of a cloud'

    def add_arguments(self, parser):
        parser.add_argument('--name', type=str, help='New name of the cloud')
        parser.add_argument('--s3-bucket', type=str, help='S3 bucket the videos are stored in')
        parser.add_argument('--aws-access-key', type=str, help='AWS access key for the bucket')
        parser.add_argument('--aws-secret-key', type=str, help='AWS secret key for the bucket')
        access = parser.add_mutually_exclusive_group()
        access.add_argument(
            '--s3-private-access',
            dest='s3_private_access',
            action='store_true',
            default=None,
            help='Make stored videos private',
        )
        access.add_argument(
            '--s3-public-access',
            dest='s3_private_access',
            action='store_false',
            default=None,
            help='Make stored videos public',
        )

    def handle_cloud(self, cloud, **options):
        data = {}
        if options['name']:
            data['name'] = options['name']
        if options['s3_bucket']:
            data['s3_videos_bucket'] = options['s3_bucket']
        if options['aws_access_key']:
            data['aws_access_key'] = options['aws_access_key']
        if options['aws_secret_key']:
            data['aws_secret_key'] = options['aws_secret_key']
        if options['s3_private_access'] is not None:
            data['s3_private_access'] = 'true' if options['s3_private_access'] else 'false'

        if not data:
            raise CommandError('Nothing to change, pass at least one option')

        result = cloud.set_cloud(cloud.api.cloud_id, data)
        self.stdout.write(self.style.SUCCESS(f'Successfully modified cloud {result.id}'))
        self.write_fields(result)
