from pathlib import Path

from src.config.settings import SitemapSettings, load_settings
from src.sitemap.application.diagnostics import DiagnosticsContext
from src.sitemap.infrastructure.artifact_cleaner import ArtifactCleaner
from src.sitemap.infrastructure.config_script import ConfigScriptInstaller
from src.sitemap.infrastructure.project_root import ProjectRoot
from src.sitemap.infrastructure.templates import TemplateDirectory


def build_installer(
    settings: SitemapSettings | None = None,
    diagnostics: DiagnosticsContext | None = None,
) -> ConfigScriptInstaller:
    settings = settings or load_settings()
    return ConfigScriptInstaller(
        project_root=ProjectRoot(settings.project_root),
        templates=TemplateDirectory(settings.templates_dir),
        config_path=settings.config_path,
        diagnostics=diagnostics,
    )


def install_sitemap_config(
    verbose: bool = False,
    *,
    settings: SitemapSettings | None = None,
    diagnostics: DiagnosticsContext | None = None,
) -> bool:
    """Copy the sample config script into the project unless one is already there."""
    return build_installer(settings, diagnostics).install(verbose=verbose)


def uninstall_sitemap_config(*, settings: SitemapSettings | None = None) -> bool:
    return build_installer(settings).uninstall()


def clean_files(*, settings: SitemapSettings | None = None) -> list[Path]:
    """Delete previously generated sitemap files from the output directory."""
    settings = settings or load_settings()
    cleaner = ArtifactCleaner(settings.public_dir, pattern=settings.artifact_pattern)
    return cleaner.clean()
