import io
import unittest
from contextlib import redirect_stdout

from src.config.settings import load_settings
from src.sitemap.lifecycle import clean_files, install_sitemap_config, uninstall_sitemap_config
from tests.utils.tempdir import managed_temp_dir, touch_files


class LifecycleTests(unittest.TestCase):
    def test_install_uninstall_with_bundled_template(self):
        with managed_temp_dir("lifecycle_install") as tmp:
            settings = load_settings(project_root=str(tmp))

            out = io.StringIO()
            with redirect_stdout(out):
                self.assertTrue(install_sitemap_config(verbose=True, settings=settings))
                self.assertFalse(install_sitemap_config(verbose=True, settings=settings))

            self.assertTrue(settings.config_file.is_file())
            self.assertEqual(
                out.getvalue().splitlines(),
                ["created: config/sitemap.py", "already exists: config/sitemap.py, file not copied"],
            )

            self.assertTrue(uninstall_sitemap_config(settings=settings))
            self.assertFalse(settings.config_file.exists())

    def test_clean_files_uses_public_dir(self):
        with managed_temp_dir("lifecycle_clean") as tmp:
            settings = load_settings(project_root=str(tmp))
            touch_files(settings.public_dir, "sitemap1.xml.gz", "sitemap_index.xml.gz", "unrelated.txt")

            removed = clean_files(settings=settings)

            self.assertEqual(len(removed), 2)
            self.assertEqual([p.name for p in settings.public_dir.iterdir()], ["unrelated.txt"])
