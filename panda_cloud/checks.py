"""
System checks for the PANDA_* settings.

Run by ./manage.py check and before every management command started from
the command line.
"""

from django.core import checks
from django.core.exceptions import ImproperlyConfigured

from panda_cloud import config


@checks.register('panda')
def check_panda_settings(app_configs=None, **kwargs):
    errors = []
    clouds = config.get_clouds()
    accounts = config.get_accounts()
    factory_path = config.get_api_factory_path()

    if clouds and not factory_path:
        errors.append(
            checks.Error(
                'PANDA_CLOUDS is configured but PANDA_API_FACTORY is not set.',
                hint='Point PANDA_API_FACTORY at a callable building Panda API clients.',
                id='panda.E001',
            )
        )
    elif factory_path:
        try:
            config.get_api_factory()
        except ImproperlyConfigured as e:
            errors.append(checks.Error(str(e), id='panda.E002'))

    for name, cloud in clouds.items():
        if not cloud.get('id'):
            errors.append(checks.Error(f'Panda cloud "{name}" has no id.', id='panda.E003'))

        account = cloud.get('account', config.get_default_account_name())
        if account not in accounts:
            errors.append(
                checks.Error(
                    f'Panda cloud "{name}" uses unknown account "{account}".',
                    hint='Add the account to PANDA_ACCOUNTS.',
                    id='panda.E004',
                )
            )

    default_cloud = config.get_default_cloud_name()
    if clouds and default_cloud not in clouds:
        errors.append(
            checks.Warning(
                f'PANDA_DEFAULT_CLOUD "{default_cloud}" is not configured in PANDA_CLOUDS.',
                hint='Commands will need an explicit --cloud option.',
                id='panda.W001',
            )
        )

    return errors
