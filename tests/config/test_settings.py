import unittest
from pathlib import Path
from unittest.mock import patch

from src.config.settings import BUNDLED_TEMPLATES_DIR, SettingsError, load_settings
from src.sitemap.domain.errors import InvalidKeySetError


class LoadSettingsTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = load_settings()
        self.assertEqual(settings.project_root, Path(".").resolve())
        self.assertEqual(settings.config_path, Path("config/sitemap.py"))
        self.assertEqual(settings.public_dir, Path(".").resolve() / "public")
        self.assertEqual(settings.artifact_pattern, "sitemap*.xml.gz")
        self.assertEqual(settings.templates_dir, BUNDLED_TEMPLATES_DIR)

    def test_environment_then_overrides(self):
        env = {"SITEMAP_PUBLIC_PATH": "static", "SITEMAP_ARTIFACT_PATTERN": "   "}
        with patch.dict("os.environ", env, clear=True):
            settings = load_settings({b"config_path": "conf/sitemap.py"}, public_path="out")
            from_env = load_settings()
        self.assertEqual(settings.config_path, Path("conf/sitemap.py"))
        self.assertEqual(settings.public_path, Path("out"))
        self.assertEqual(from_env.public_path, Path("static"))
        self.assertEqual(from_env.artifact_pattern, "sitemap*.xml.gz")

    def test_blank_override_falls_through(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = load_settings(public_path="")
        self.assertEqual(settings.public_path, Path("public"))

    def test_unknown_option_is_rejected(self):
        with self.assertRaises(InvalidKeySetError):
            load_settings(output="public")

    def test_absolute_config_path_is_rejected(self):
        with patch.dict("os.environ", {}, clear=True):
            with self.assertRaises(SettingsError):
                load_settings(config_path=str(Path("/etc/sitemap.py").resolve()))
