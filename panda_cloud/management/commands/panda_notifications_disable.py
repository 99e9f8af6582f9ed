from panda_cloud.management.commands.panda_notifications_enable import Command as EnableCommand


class Command(EnableCommand):
    help = 'Disable a notification event'
    active = False
