# Paths used by the sitemap lifecycle commands, read from the environment / .env

import os
from dataclasses import dataclass, fields
from pathlib import Path, PurePath
from typing import Any, Mapping

from dotenv import load_dotenv
from pathvalidate import ValidationError, validate_filepath

from src.sitemap.domain import assert_valid_keys, is_present, reverse_merge, symbolize_keys

load_dotenv()

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "sitemap" / "templates"

ENV_VARS = {
    "project_root": "SITEMAP_PROJECT_ROOT",
    "config_path": "SITEMAP_CONFIG_PATH",
    "public_path": "SITEMAP_PUBLIC_PATH",
    "artifact_pattern": "SITEMAP_ARTIFACT_PATTERN",
    "templates_dir": "SITEMAP_TEMPLATES_DIR",
}

DEFAULTS = {
    "project_root": ".",
    "config_path": "config/sitemap.py",
    "public_path": "public",
    "artifact_pattern": "sitemap*.xml.gz",
    "templates_dir": str(BUNDLED_TEMPLATES_DIR),
}


class SettingsError(ValueError):
    pass


@dataclass(frozen=True)
class SitemapSettings:
    project_root: Path
    config_path: Path
    public_path: Path
    artifact_pattern: str
    templates_dir: Path

    @property
    def config_file(self) -> Path:
        return self.project_root / self.config_path

    @property
    def public_dir(self) -> Path:
        return self.project_root / self.public_path


def _validate_relative_path(name: str, value: str) -> Path:
    if PurePath(value).is_absolute():
        raise SettingsError(f"{name} must be relative to the project root: {value}")
    try:
        validate_filepath(value, platform="auto")
    except ValidationError as exc:
        raise SettingsError(f"{name} is not a valid path: {value} ({exc})") from exc
    return Path(value)


def _from_environment() -> dict[str, str]:
    values = {}
    for name, env_var in ENV_VARS.items():
        value = os.getenv(env_var)
        if is_present(value):
            values[name] = value.strip()
    return values


def load_settings(options: Mapping[Any, Any] | None = None, **overrides: Any) -> SitemapSettings:
    """
    Build settings from explicit options, then the environment, then defaults.

    ``options`` may use str, bytes or Enum keys; keyword overrides win over it.
    Blank values fall through to the next layer.
    """
    given = reverse_merge(overrides, symbolize_keys(dict(options or {})))
    assert_valid_keys(given, [f.name for f in fields(SitemapSettings)])
    given = {key: str(value) for key, value in given.items() if is_present(value)}
    values = reverse_merge(reverse_merge(given, _from_environment()), DEFAULTS)

    return SitemapSettings(
        project_root=Path(values["project_root"]).resolve(),
        config_path=_validate_relative_path("config_path", values["config_path"]),
        public_path=_validate_relative_path("public_path", values["public_path"]),
        artifact_pattern=values["artifact_pattern"],
        templates_dir=Path(values["templates_dir"]),
    )
