from pathlib import Path

from src.sitemap.application.ports import ProjectRootPort


class ProjectRoot(ProjectRootPort):
    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def join(self, relative: str | Path) -> Path:
        return self._root / relative
