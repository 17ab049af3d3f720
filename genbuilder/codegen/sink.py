"""
File sink for generated artifacts.

Creates the output directory on demand and writes each finalized
artifact as a UTF-8 file. Any OS error is fatal and surfaces as
SinkFailure.
"""

from pathlib import Path
from typing import Iterable, List, Union

from .core.errors import GeneratorError, SinkFailure
from .core.generator import GeneratedArtifact
from ..logging_config import get_logger

logger = get_logger(__name__)


class FileSink:
    """Writes artifacts into one output directory."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def ensure_directory(self) -> Path:
        """Create the output directory and its parents if missing."""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Unable to create directory %s: %s", self.output_dir, e)
            raise SinkFailure(self.output_dir, e) from e
        return self.output_dir

    def path_for(self, artifact: GeneratedArtifact) -> Path:
        return self.output_dir / artifact.file_name

    def write(self, artifact: GeneratedArtifact) -> Path:
        """
        Persist one artifact.

        Returns:
            Path of the written file

        Raises:
            GeneratorError: If the artifact was never finalized
            SinkFailure: If the directory or file cannot be written
        """
        if not artifact.finalized:
            raise GeneratorError(f"Refusing to write open artifact {artifact.file_name}")

        self.ensure_directory()
        path = self.path_for(artifact)
        try:
            path.write_text(artifact.text, encoding="utf-8")
        except OSError as e:
            logger.error("Unable to write %s: %s", path, e)
            raise SinkFailure(path, e) from e

        logger.info("Wrote %s", path)
        return path

    def write_all(self, artifacts: Iterable[GeneratedArtifact]) -> List[Path]:
        return [self.write(artifact) for artifact in artifacts]
