"""
Named Cloud services built from settings.

get_cloud() is the entry point used by views, management commands and
project code. Clouds are constructed lazily the first time they are asked
for.
"""

import functools
import logging
import threading

from panda_cloud import config
from panda_cloud.cloud import Cloud
from panda_cloud.exceptions import UnknownCloud
from panda_cloud.transformers import TransformerRegistry


log = logging.getLogger(__name__)


class CloudManager:
    """Registry of Cloud facades keyed by name."""

    def __init__(self, default_cloud='default', builders=None):
        self.default_cloud = default_cloud
        self._clouds = {}
        self._builders = dict(builders or {})
        self._lock = threading.Lock()

    def register_cloud(self, name, cloud):
        self._clouds[name] = cloud

    def has_cloud(self, name):
        return name in self._clouds or name in self._builders

    def get_cloud_names(self):
        return sorted(set(self._clouds) | set(self._builders))

    def get_cloud(self, name=None):
        """
        Get a cloud by name, or the default cloud when name is None.

        Raises:
            UnknownCloud: If no cloud is registered under the name
        """
        if name is None:
            name = self.default_cloud

        if name in self._clouds:
            return self._clouds[name]

        with self._lock:
            if name not in self._clouds:
                if name not in self._builders:
                    raise UnknownCloud(name)
                self._clouds[name] = self._builders[name]()
                del self._builders[name]

        return self._clouds[name]

    def get_default_cloud(self):
        return self.get_cloud(self.default_cloud)


def build_cloud(name, transformers=None):
    """Build the Cloud facade for a cloud configured in PANDA_CLOUDS"""
    options = config.get_cloud_options(name)
    api = config.get_api_factory()(**options)
    log.info('Built Panda cloud "%s" (id %s)', name, options['cloud_id'])
    return Cloud(api, transformers, upload_chunk_size=config.get_upload_chunk_size())


@functools.lru_cache(maxsize=None)
def get_cloud_manager():
    """Get the manager for the clouds configured in settings"""
    transformers = TransformerRegistry()
    builders = {
        name: functools.partial(build_cloud, name, transformers) for name in config.get_clouds()
    }
    return CloudManager(config.get_default_cloud_name(), builders)


def get_cloud(name=None):
    return get_cloud_manager().get_cloud(name)
