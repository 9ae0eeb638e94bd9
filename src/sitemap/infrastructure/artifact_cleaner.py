from pathlib import Path

from src.config.logger_config import logger


class ArtifactCleaner:
    def __init__(self, output_dir: str | Path, pattern: str = "sitemap*.xml.gz") -> None:
        self.output_dir = Path(output_dir)
        self.pattern = pattern

    def matching_files(self) -> list[Path]:
        return sorted(path for path in self.output_dir.glob(self.pattern) if path.is_file())

    def clean(self) -> list[Path]:
        removed = []
        for path in self.matching_files():
            path.unlink()
            removed.append(path)
        logger.info("Removed {} sitemap file(s) from {} matching {}", len(removed), self.output_dir, self.pattern)
        return removed
