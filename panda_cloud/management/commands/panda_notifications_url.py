from panda_cloud.management.base import CloudCommand
from panda_cloud.models import Notifications


class Command(CloudCommand):
    help = 'Change the url Panda sends notifications to'

    def add_arguments(self, parser):
        parser.add_argument('url', type=str, help='The notification url')

    def handle_cloud(self, cloud, **options):
        notifications = cloud.set_notifications(Notifications(url=options['url']))
        self.stdout.write(self.style.SUCCESS(f'Notifications are sent to {notifications.url}'))
