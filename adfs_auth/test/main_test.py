import unittest
from unittest import mock

from adfs_auth import main, base_client, config

LOGIN_ARGV = ["adfs_auth", "-a", "adfs.example.com", "login",
              "-u", "bob", "-a", "Dev", "-t", "arn:aws:iam::1:role/Deploy",
              "-r", "bob-deploy"]


class MainTest(unittest.TestCase):
    def test_get_config_parser(self):
        # Simple execution test again - get the argument parser and make sure
        # it looks reasonably correct. Just validating that this function has
        # no major typos.

        # Also simulates the _required_ options being passed in
        ret = main.get_config_parser(LOGIN_ARGV)
        self.assertEqual(ret.ad_url, "adfs.example.com")
        self.assertEqual(ret.command, "login")
        self.assertEqual(ret.username, "bob")
        self.assertEqual(ret.ad_role, "Dev")
        self.assertEqual(ret.target_role_arn, "arn:aws:iam::1:role/Deploy")
        self.assertEqual(ret.role_session_name, "bob-deploy")
        self.assertEqual(ret.temp_creds_file, config.DEFAULT_CREDS_FILE)
        self.assertEqual(ret.region, config.DEFAULT_REGION)
        self.assertEqual(ret.password, None)
        self.assertFalse(ret.debug)

    def test_get_config_parser_password(self):
        argv = (["adfs_auth", "-a", "adfs.example.com", "-t", "/tmp/creds", "-D"]
                + LOGIN_ARGV[3:] + ["pw"])
        ret = main.get_config_parser(argv)
        self.assertEqual(ret.password, "pw")
        self.assertEqual(ret.temp_creds_file, "/tmp/creds")
        self.assertTrue(ret.debug)

    def test_get_config_parser_requires_login_args(self):
        with self.assertRaises(SystemExit):
            main.get_config_parser(["adfs_auth", "-a", "adfs", "login"])

    @mock.patch("adfs_auth.auth.login")
    def test_entry_point(self, auth_login):
        with mock.patch("sys.argv", LOGIN_ARGV + ["pw"]):
            main.entry_point()

        kwargs = auth_login.call_args[1]
        self.assertEqual(kwargs["config"].host, "adfs.example.com")
        self.assertEqual(kwargs["config"].creds_file, config.DEFAULT_CREDS_FILE)
        self.assertEqual(kwargs["role_filter"], "Dev")
        self.assertEqual(kwargs["session_name"], "bob-deploy")
        self.assertEqual(kwargs["password"], "pw")

    @mock.patch("adfs_auth.auth.login")
    @mock.patch("adfs_auth.main.get_config_parser")
    def test_entry_point_failure(self, config_mock, auth_login):
        # Given
        fake_parser = mock.MagicMock(name="fake_parser")
        config_mock.return_value = fake_parser
        auth_login.side_effect = base_client.BaseException()
        # Except
        with self.assertRaises(SystemExit):
            main.entry_point()
