#!/usr/bin/env python3
"""
Tests for configuration loading.
"""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from license_issuer.config import Config
from license_issuer.exceptions import ConfigurationError


CONFIG_VARS = ("LICENSE_PRIVATE_KEY_PATH", "LICENSE_OUTPUT_PATH", "LICENSE_KEY_PASSWORD", "LOG_LEVEL")


def clean_environ(**values):
    env = {k: v for k, v in os.environ.items() if k not in CONFIG_VARS}
    env.update(values)
    return patch.dict(os.environ, env, clear=True)


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        with clean_environ():
            config = Config()
        self.assertEqual(config.private_key_path, Path("./private_key.pem"))
        self.assertEqual(config.output_path, Path("./LICENSE.key"))
        self.assertIsNone(config.key_password)
        self.assertEqual(config.log_level, "INFO")

    def test_environment_values(self):
        with clean_environ(
            LICENSE_PRIVATE_KEY_PATH="/keys/signing.pem",
            LICENSE_OUTPUT_PATH="/out/LICENSE.key",
            LICENSE_KEY_PASSWORD="pw",
            LOG_LEVEL="debug",
        ):
            config = Config()
        self.assertEqual(config.private_key_path, Path("/keys/signing.pem"))
        self.assertEqual(config.output_path, Path("/out/LICENSE.key"))
        self.assertEqual(config.key_password, "pw")
        self.assertEqual(config.log_level, "DEBUG")

    def test_overrides_win_over_environment(self):
        with clean_environ(LICENSE_OUTPUT_PATH="/env/LICENSE.key"):
            config = Config(output_path="/override/LICENSE.key", log_level="warning")
        self.assertEqual(config.output_path, Path("/override/LICENSE.key"))
        self.assertEqual(config.log_level, "WARNING")

    def test_env_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / "issuer.env"
            env_file.write_text("LICENSE_OUTPUT_PATH=/from/file/LICENSE.key\n")
            with clean_environ():
                config = Config(env_file=str(env_file))
        self.assertEqual(config.output_path, Path("/from/file/LICENSE.key"))

    def test_invalid_log_level(self):
        with clean_environ(LOG_LEVEL="LOUD"):
            with self.assertRaises(ConfigurationError) as ctx:
                Config()
        self.assertEqual(ctx.exception.exit_code, 5)

    def test_password_never_shown(self):
        with clean_environ():
            config = Config(key_password="hunter2")
        self.assertNotIn("hunter2", repr(config))
        self.assertNotIn("hunter2", str(config.get_status()))
        self.assertTrue(config.get_status()["key_password_set"])


if __name__ == "__main__":
    unittest.main()
