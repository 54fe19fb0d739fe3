import dataclasses
import unittest

from sacavia.config import (
    DEVELOPMENT_BASE_URL,
    IS_DEVELOPMENT,
    PRODUCTION_BASE_URL,
    Config,
    get_default_config,
)


class ConfigTests(unittest.TestCase):
    def test_from_flag(self) -> None:
        dev = Config.from_flag(True)
        self.assertEqual(dev.base_api_url, "http://localhost:3000")
        self.assertEqual(dev.environment_name, "Development")
        prod = Config.from_flag(False)
        self.assertEqual(prod.base_api_url, "https://sacavia.com")
        self.assertEqual(prod.environment_name, "Production")

    def test_default_is_production(self) -> None:
        config = get_default_config()
        self.assertFalse(IS_DEVELOPMENT)
        self.assertEqual(config.base_api_url, PRODUCTION_BASE_URL)
        self.assertEqual(config, Config())

    def test_web_api_url(self) -> None:
        self.assertEqual(Config.from_flag(False).web_api_url, "https://sacavia.com/api")
        self.assertEqual(Config.from_flag(True).web_api_url, "http://localhost:3000/api")

    def test_from_env(self) -> None:
        self.assertEqual(Config.from_env({"SACAVIA_DEVELOPMENT": "true"}).base_api_url, DEVELOPMENT_BASE_URL)
        self.assertEqual(Config.from_env({"SACAVIA_DEVELOPMENT": " 1 "}).base_api_url, DEVELOPMENT_BASE_URL)
        self.assertEqual(Config.from_env({"SACAVIA_DEVELOPMENT": "off"}).base_api_url, PRODUCTION_BASE_URL)
        self.assertEqual(Config.from_env({"SACAVIA_DEVELOPMENT": "maybe"}), get_default_config())
        self.assertEqual(Config.from_env({}), get_default_config())

    def test_frozen(self) -> None:
        config = Config.from_flag(False)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.base_api_url = "https://evil.example"


if __name__ == "__main__":
    unittest.main()
