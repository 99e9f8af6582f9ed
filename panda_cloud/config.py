"""
Configuration adapter for the Panda settings.

Centralizes access to the PANDA_* Django settings so the cloud manager,
system checks and commands read them the same way.

Example settings:

    PANDA_API_FACTORY = 'myproject.panda.build_api'
    PANDA_ACCOUNTS = {
        'default': {'access_key': '...', 'secret_key': '...'},
    }
    PANDA_CLOUDS = {
        'default': {'id': 'abc123'},
        'staging': {'id': 'def456', 'account': 'default'},
    }
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from panda_cloud.upload import DEFAULT_CHUNK_SIZE


DEFAULT_API_HOST = 'api.pandastream.com'
DEFAULT_API_PORT = 443


def get_accounts():
    """Get the configured accounts, keyed by name"""
    return getattr(settings, 'PANDA_ACCOUNTS', {})


def get_clouds():
    """Get the configured clouds, keyed by name"""
    return getattr(settings, 'PANDA_CLOUDS', {})


def get_default_account_name():
    return getattr(settings, 'PANDA_DEFAULT_ACCOUNT', 'default')


def get_default_cloud_name():
    return getattr(settings, 'PANDA_DEFAULT_CLOUD', 'default')


def get_upload_chunk_size():
    return getattr(settings, 'PANDA_UPLOAD_CHUNK_SIZE', DEFAULT_CHUNK_SIZE)


def get_api_factory_path():
    return getattr(settings, 'PANDA_API_FACTORY', None)


def get_api_factory():
    """
    Import the callable that builds API clients.

    Raises:
        ImproperlyConfigured: If PANDA_API_FACTORY is unset or not importable
    """
    path = get_api_factory_path()
    if not path:
        raise ImproperlyConfigured('PANDA_API_FACTORY must be set to build Panda clouds.')
    try:
        return import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(f'Cannot import PANDA_API_FACTORY "{path}": {e}')


def get_account(name):
    """
    Get the credentials of an account with host and port defaults applied.

    Args:
        name: Account name from PANDA_ACCOUNTS

    Returns:
        dict: access_key, secret_key, api_host and api_port
    """
    accounts = get_accounts()
    if name not in accounts:
        raise ImproperlyConfigured(f'Panda account "{name}" is not configured in PANDA_ACCOUNTS.')

    account = accounts[name]
    return {
        'access_key': account.get('access_key'),
        'secret_key': account.get('secret_key'),
        'api_host': account.get('api_host', DEFAULT_API_HOST),
        'api_port': account.get('api_port', DEFAULT_API_PORT),
    }


def get_cloud_options(name):
    """
    Get the keyword arguments passed to the API factory for a cloud.

    Args:
        name: Cloud name from PANDA_CLOUDS

    Returns:
        dict: cloud_id plus the credentials of the cloud's account
    """
    clouds = get_clouds()
    if name not in clouds:
        raise ImproperlyConfigured(f'Panda cloud "{name}" is not configured in PANDA_CLOUDS.')

    cloud = clouds[name]
    if not cloud.get('id'):
        raise ImproperlyConfigured(f'Panda cloud "{name}" has no id.')

    options = {'cloud_id': cloud['id']}
    options.update(get_account(cloud.get('account', get_default_account_name())))
    return options
