"""
Tests for manager.py and config.py

testproject.settings configures two clouds ("default" and "eu") built by
panda_cloud.tests.utils.FakeApi.
"""

import threading
import time
from unittest.mock import Mock

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from panda_cloud import config
from panda_cloud.cloud import Cloud
from panda_cloud.exceptions import UnknownCloud
from panda_cloud.manager import CloudManager, get_cloud, get_cloud_manager
from panda_cloud.tests.utils import FakeApi


class CloudManagerTest(SimpleTestCase):
    """Tests for CloudManager"""

    def test_register_and_get(self):
        """Test a registered cloud is returned by name"""
        manager = CloudManager()
        cloud = Mock(spec=Cloud)
        manager.register_cloud('main', cloud)

        self.assertTrue(manager.has_cloud('main'))
        self.assertIs(manager.get_cloud('main'), cloud)

    def test_get_default_cloud(self):
        """Test None and get_default_cloud() use the default name"""
        manager = CloudManager(default_cloud='main')
        cloud = Mock(spec=Cloud)
        manager.register_cloud('main', cloud)

        self.assertIs(manager.get_cloud(), cloud)
        self.assertIs(manager.get_default_cloud(), cloud)

    def test_unknown_cloud(self):
        """Test asking for an unregistered cloud"""
        manager = CloudManager()

        self.assertFalse(manager.has_cloud('missing'))
        with self.assertRaises(UnknownCloud) as ctx:
            manager.get_cloud('missing')
        self.assertEqual(ctx.exception.name, 'missing')

    def test_builders_run_once_on_first_use(self):
        """Test clouds are built lazily and cached"""
        cloud = Mock(spec=Cloud)
        builder = Mock(return_value=cloud)
        manager = CloudManager(builders={'lazy': builder})

        self.assertTrue(manager.has_cloud('lazy'))
        builder.assert_not_called()

        self.assertIs(manager.get_cloud('lazy'), cloud)
        self.assertIs(manager.get_cloud('lazy'), cloud)
        builder.assert_called_once_with()

    def test_concurrent_first_use_builds_once(self):
        """Test two threads asking for a lazy cloud at once"""
        cloud = Mock(spec=Cloud)
        calls = []

        def slow_builder():
            calls.append(1)
            time.sleep(0.1)
            return cloud

        manager = CloudManager(builders={'default': slow_builder})
        results = []
        errors = []

        def worker():
            try:
                results.append(manager.get_cloud())
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])
        self.assertEqual(results, [cloud, cloud])
        self.assertEqual(len(calls), 1)

    def test_failed_build_can_be_retried(self):
        """Test a builder that raised is kept for the next call"""
        cloud = Mock(spec=Cloud)
        builder = Mock(side_effect=[RuntimeError('boom'), cloud])
        manager = CloudManager(builders={'lazy': builder})

        with self.assertRaises(RuntimeError):
            manager.get_cloud('lazy')

        self.assertIs(manager.get_cloud('lazy'), cloud)

    def test_get_cloud_names(self):
        """Test registered and lazy names are listed"""
        manager = CloudManager(builders={'b': Mock()})
        manager.register_cloud('a', Mock(spec=Cloud))
        self.assertEqual(manager.get_cloud_names(), ['a', 'b'])


class ConfiguredCloudsTest(SimpleTestCase):
    """Tests for clouds built from the PANDA_* settings"""

    def setUp(self):
        get_cloud_manager.cache_clear()

    def test_default_cloud(self):
        """Test the default cloud is built with the default account"""
        cloud = get_cloud()

        self.assertIsInstance(cloud, Cloud)
        self.assertIsInstance(cloud.api, FakeApi)
        self.assertEqual(cloud.api.cloud_id, 'default-cloud-id')
        self.assertEqual(cloud.api.access_key, 'test-access-key')
        self.assertEqual(cloud.api.api_host, 'api.pandastream.com')
        self.assertEqual(cloud.api.api_port, 443)

    def test_named_cloud_with_other_account(self):
        """Test a cloud using a non-default account"""
        cloud = get_cloud('eu')

        self.assertEqual(cloud.api.cloud_id, 'eu-cloud-id')
        self.assertEqual(cloud.api.secret_key, 'other-secret-key')
        self.assertEqual(cloud.api.api_host, 'api-eu.pandastream.com')

    def test_cloud_is_shared(self):
        """Test the same facade is handed out on every call"""
        self.assertIs(get_cloud('default'), get_cloud())

    def test_get_cloud_data_uses_bound_cloud_id(self):
        """Test the built facade talks to its own cloud"""
        data = get_cloud('eu').get_cloud_data()
        self.assertEqual(data.id, 'eu-cloud-id')

    def test_unknown_cloud(self):
        """Test an unconfigured name"""
        with self.assertRaises(UnknownCloud):
            get_cloud('nowhere')

    @override_settings(PANDA_CLOUDS={'main': {'id': 'main-id'}}, PANDA_DEFAULT_CLOUD='main')
    def test_manager_rebuilt_when_settings_change(self):
        """Test override_settings takes effect without clearing caches by hand"""
        self.assertEqual(get_cloud().api.cloud_id, 'main-id')
        self.assertEqual(get_cloud_manager().get_cloud_names(), ['main'])

    @override_settings(PANDA_UPLOAD_CHUNK_SIZE=1024)
    def test_upload_chunk_size_setting(self):
        """Test the chunk size is passed to the facade"""
        self.assertEqual(get_cloud().upload_chunk_size, 1024)

    @override_settings(PANDA_API_FACTORY=None)
    def test_missing_factory(self):
        """Test building a cloud without a factory"""
        with self.assertRaises(ImproperlyConfigured):
            get_cloud()

    @override_settings(PANDA_API_FACTORY='panda_cloud.tests.utils.NoSuchApi')
    def test_factory_not_importable(self):
        """Test a factory path that cannot be imported"""
        with self.assertRaisesMessage(ImproperlyConfigured, 'NoSuchApi'):
            get_cloud()


class ConfigTest(SimpleTestCase):
    """Tests for config.py"""

    def test_get_account_defaults(self):
        """Test host and port defaults are applied"""
        account = config.get_account('default')
        self.assertEqual(account['api_host'], config.DEFAULT_API_HOST)
        self.assertEqual(account['api_port'], config.DEFAULT_API_PORT)

    def test_get_unknown_account(self):
        """Test an unconfigured account"""
        with self.assertRaises(ImproperlyConfigured):
            config.get_account('nobody')

    def test_get_cloud_options(self):
        """Test the factory keyword arguments of a cloud"""
        self.assertEqual(
            config.get_cloud_options('eu'),
            {
                'cloud_id': 'eu-cloud-id',
                'access_key': 'other-access-key',
                'secret_key': 'other-secret-key',
                'api_host': 'api-eu.pandastream.com',
                'api_port': 443,
            },
        )

    @override_settings(PANDA_CLOUDS={'broken': {}})
    def test_cloud_without_id(self):
        """Test a cloud missing its id"""
        with self.assertRaises(ImproperlyConfigured):
            config.get_cloud_options('broken')

    def test_unknown_cloud_options(self):
        """Test an unconfigured cloud"""
        with self.assertRaises(ImproperlyConfigured):
            config.get_cloud_options('nowhere')

    @override_settings()
    def test_defaults_without_settings(self):
        """Test defaults when the PANDA_* settings are absent"""
        from django.conf import settings

        del settings.PANDA_CLOUDS
        del settings.PANDA_ACCOUNTS

        self.assertEqual(config.get_clouds(), {})
        self.assertEqual(config.get_accounts(), {})
        self.assertEqual(config.get_default_cloud_name(), 'default')
        self.assertEqual(config.get_default_account_name(), 'default')
