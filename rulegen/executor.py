import logging
from pathlib import Path

from rulegen.models import GeneratedOutput, WriteOutcome, WriteResult, WriteStatus
from rulegen.utils import backup_file, read_text_safe

logger = logging.getLogger(__name__)


class OutputWriter:
    """Write generated outputs to disk, backing up files it replaces."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def resolve(self, output: GeneratedOutput) -> Path:
        path = Path(output.filepath)
        if path.is_absolute():
            return path
        return self.root / path

    def status_for(self, output: GeneratedOutput) -> WriteStatus:
        path = self.resolve(output)
        if not path.exists():
            return WriteStatus.CREATE
        if read_text_safe(path) == output.content:
            return WriteStatus.NOOP
        return WriteStatus.UPDATE

    def write_one(self, output: GeneratedOutput) -> WriteOutcome:
        path = self.resolve(output)
        status = self.status_for(output)
        if status == WriteStatus.NOOP:
            return WriteOutcome(path=path, status=status)
        try:
            if status == WriteStatus.UPDATE:
                backup_file(path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(output.content, encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to write %s: %s", path, exc)
            return WriteOutcome(path=path, status=WriteStatus.FAILED, detail=str(exc))
        return WriteOutcome(path=path, status=status)

    def plan(self, outputs: list[GeneratedOutput]) -> WriteResult:
        return WriteResult(
            outcomes=[
                WriteOutcome(path=self.resolve(item), status=self.status_for(item))
                for item in outputs
            ]
        )

    def write(self, outputs: list[GeneratedOutput]) -> WriteResult:
        return WriteResult(outcomes=[self.write_one(item) for item in outputs])
