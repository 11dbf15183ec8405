from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ToolTarget(str, Enum):
    CURSOR = "cursor"


class WriteStatus(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"
    FAILED = "failed"


@dataclass(frozen=True)
class GeneratedOutput:
    """One file to be written by the caller."""

    tool: str
    filepath: str
    content: str


@dataclass(frozen=True)
class IgnorePatterns:
    patterns: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class WriteOutcome:
    path: Path
    status: WriteStatus
    detail: str = ""


@dataclass
class WriteResult:
    outcomes: list[WriteOutcome]

    @property
    def written(self) -> list[WriteOutcome]:
        return [
            item
            for item in self.outcomes
            if item.status in (WriteStatus.CREATE, WriteStatus.UPDATE)
        ]

    @property
    def failed(self) -> list[WriteOutcome]:
        return [item for item in self.outcomes if item.status == WriteStatus.FAILED]

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in WriteStatus}
        for item in self.outcomes:
            counts[item.status.value] += 1
        counts["outputs"] = len(self.outcomes)
        return counts
