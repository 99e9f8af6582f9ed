from django.apps import AppConfig


class PandaCloudConfig(AppConfig):
    name = 'panda_cloud'
    label = 'panda'
    verbose_name = 'Panda video encoding'

    def ready(self):
        """Import signals and checks when the app is ready"""
        from panda_cloud import checks, signals  # noqa: F401
