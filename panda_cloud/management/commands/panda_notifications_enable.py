from panda_cloud.management.base import CloudCommand
from panda_cloud.models import NOTIFICATION_EVENT_NAMES, NotificationEvent, Notifications


class Command(CloudCommand):
    help = 'Enable a notification event'
    active = True

    def add_arguments(self, parser):
        parser.add_argument('event', choices=NOTIFICATION_EVENT_NAMES, help='The event to change')

    def handle_cloud(self, cloud, **options):
        event = options['event']
        notifications = Notifications()
        notifications.add_notification_event(NotificationEvent(event, self.active))
        cloud.set_notifications(notifications)

        state = 'enabled' if self.active else 'disabled'
        self.stdout.write(self.style.SUCCESS(f'Successfully {state} event {event}'))
