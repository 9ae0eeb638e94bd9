"""Filesystem adapters for the sitemap lifecycle commands."""

from src.sitemap.infrastructure.artifact_cleaner import ArtifactCleaner
from src.sitemap.infrastructure.config_script import ConfigScriptInstaller
from src.sitemap.infrastructure.project_root import ProjectRoot
from src.sitemap.infrastructure.templates import TemplateDirectory, UnknownTemplateError

__all__ = ["ArtifactCleaner", "ConfigScriptInstaller", "ProjectRoot", "TemplateDirectory", "UnknownTemplateError"]
