from pathlib import Path
from typing import ClassVar

from src.sitemap.application.ports import TemplatePathPort


class UnknownTemplateError(KeyError):
    pass


class TemplateDirectory(TemplatePathPort):
    FILES: ClassVar[dict[str, str]] = {
        "sitemap_sample": "sitemap.py.tmpl",
    }

    def __init__(self, templates_dir: str | Path) -> None:
        self.templates_dir = Path(templates_dir)

    def names(self) -> list[str]:
        return sorted(self.FILES)

    def template_path(self, name: str) -> Path:
        try:
            filename = self.FILES[name]
        except KeyError:
            raise UnknownTemplateError(name) from None
        return self.templates_dir / filename
