import shutil
from pathlib import Path

from src.config.logger_config import logger
from src.sitemap.application.diagnostics import DiagnosticsContext
from src.sitemap.application.ports import ProjectRootPort, TemplatePathPort

SAMPLE_TEMPLATE = "sitemap_sample"


class ConfigScriptInstaller:
    """Copies the sample config script into the project, or removes it again."""

    def __init__(
        self,
        project_root: ProjectRootPort,
        templates: TemplatePathPort,
        config_path: str | Path = "config/sitemap.py",
        diagnostics: DiagnosticsContext | None = None,
    ) -> None:
        self.project_root = project_root
        self.templates = templates
        self.config_path = Path(config_path)
        self.diagnostics = diagnostics or DiagnosticsContext()

    @property
    def target(self) -> Path:
        return self.project_root.join(self.config_path)

    def install(self, verbose: bool = False) -> bool:
        with self.diagnostics.scoped(verbose) as diagnostics:
            target = self.target
            if target.exists():
                logger.info("Config script exists, skipping install: {}", target)
                diagnostics.emit(f"already exists: {self.config_path.as_posix()}, file not copied")
                return False

            source = self.templates.template_path(SAMPLE_TEMPLATE)
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
            logger.info("Config script installed: {} -> {}", source, target)
            diagnostics.emit(f"created: {self.config_path.as_posix()}")
            return True

    def uninstall(self) -> bool:
        target = self.target
        if not target.exists():
            return False
        target.unlink()
        logger.info("Config script removed: {}", target)
        return True
