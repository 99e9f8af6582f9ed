from panda_cloud.management.base import CloudCommand
from panda_cloud.models import NOTIFICATION_EVENT_NAMES
from panda_cloud.utils import format_table


class Command(CloudCommand):
    help = 'Show the notification configuration'

    def handle_cloud(self, cloud, **options):
        notifications = cloud.get_notifications()
        self.stdout.write(f'Url: {notifications.url or "(not set)"}')

        rows = []
        for name in NOTIFICATION_EVENT_NAMES:
            event = notifications.get_notification_event(name)
            if event is None:
                state = 'unknown'
            else:
                state = 'enabled' if event.active else 'disabled'
            rows.append((name, state))

        for line in format_table(['Event', 'State'], rows):
            self.stdout.write(line)
