from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TemplatePathPort(Protocol):
    def template_path(self, name: str) -> Path: ...
    """Return the source file of the named template."""


@runtime_checkable
class ProjectRootPort(Protocol):
    @property
    def root(self) -> Path: ...
    """Base directory that config and output paths are relative to."""

    def join(self, relative: str | Path) -> Path: ...
