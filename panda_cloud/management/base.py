"""
Base class for the panda_* management commands.

Each command is a thin CLI wrapper around one Cloud facade call.
"""

from django.core.management.base import BaseCommand, CommandError

from panda_cloud.exceptions import PandaError, UnknownCloud
from panda_cloud.manager import get_cloud
from panda_cloud.utils import format_fields


class CloudCommand(BaseCommand):
    """
    Command operating on a configured Panda cloud.

    Subclasses implement handle_cloud(cloud, **options). Errors raised by the
    Panda API become a CommandError, so the command exits with a non-zero
    status and an "An error occurred" message.
    """

    def create_parser(self, prog_name, subcommand, **kwargs):
        parser = super().create_parser(prog_name, subcommand, **kwargs)
        parser.add_argument(
            '--cloud',
            dest='cloud_name',
            type=str,
            default=None,
            help='Name of the cloud to use (default: PANDA_DEFAULT_CLOUD)',
        )
        return parser

    def get_cloud(self, options):
        try:
            return get_cloud(options.get('cloud_name'))
        except UnknownCloud as e:
            raise CommandError(f'Unknown cloud: {e.name}')

    def handle(self, *args, **options):
        cloud = self.get_cloud(options)
        try:
            self.handle_cloud(cloud, **options)
        except PandaError as e:
            raise CommandError(f'An error occurred: {e}')

    def handle_cloud(self, cloud, **options):
        raise NotImplementedError('subclasses of CloudCommand must provide a handle_cloud() method')

    def write_fields(self, instance):
        for line in format_fields(instance):
            self.stdout.write(f'  {line}')
