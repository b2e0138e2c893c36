"""Data models for node-cleaner."""

import os
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def default_worker_count() -> int:
    """Number of CPU cores, used as the default worker count."""
    return os.cpu_count() or 1


class ScanConfiguration(BaseModel):
    """Validated settings for one scan."""

    model_config = ConfigDict(frozen=True)

    root_path: Path = Field(..., description="Directory to scan (made absolute)")
    workers: int = Field(
        default_factory=default_worker_count,
        ge=1,
        description="Maximum number of concurrent deletions",
    )
    dry_run: bool = Field(False, description="Only report what would be deleted")

    @field_validator("root_path")
    @classmethod
    def resolve_root_path(cls, value: Path) -> Path:
        """Expand ~, make absolute and require the path to exist."""
        path = Path(os.path.abspath(os.path.expanduser(value)))
        if not path.exists():
            raise ValueError(f"Path does not exist: {path}")
        return path


class ScanSummary(BaseModel):
    """Read-only snapshot of a finished scan."""

    model_config = ConfigDict(frozen=True)

    root_path: Path = Field(..., description="Directory that was scanned")
    dry_run: bool = Field(False, description="Whether this was a dry run")
    scanned: int = Field(0, description="Directories visited, targets included")
    found: int = Field(0, description="node_modules directories discovered")
    deleted: int = Field(0, description="Targets deleted (or simulated in dry run)")
    errors: int = Field(0, description="Walk and deletion errors")
    bytes_freed: int = Field(0, description="Bytes reclaimed by successful deletions")
    started_at: datetime = Field(default_factory=datetime.now)
    duration_seconds: float = Field(0.0, description="Wall-clock time of walk and deletion")

    @property
    def has_errors(self) -> bool:
        """Whether the run only partially succeeded."""
        return self.errors > 0
