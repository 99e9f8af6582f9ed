"""
Django settings used to run the panda_cloud test suite and to try the
management commands locally (./manage.py panda_video_list).
"""

SECRET_KEY = 'panda-cloud-tests-not-secret'

DEBUG = True

ALLOWED_HOSTS = ['testserver', 'localhost']

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'panda_cloud',
]

ROOT_URLCONF = 'testproject.urls'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

USE_TZ = True

PANDA_API_FACTORY = 'panda_cloud.tests.utils.FakeApi'

PANDA_ACCOUNTS = {
    'default': {
        'access_key': 'test-access-key',
        'secret_key': 'test-secret-key',
    },
    'other': {
        'access_key': 'other-access-key',
        'secret_key': 'other-secret-key',
        'api_host': 'api-eu.pandastream.com',
    },
}

PANDA_CLOUDS = {
    'default': {'id': 'default-cloud-id'},
    'eu': {'id': 'eu-cloud-id', 'account': 'other'},
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
    },
    'loggers': {
        'panda_cloud': {'handlers': ['console'], 'level': 'WARNING'},
    },
}
