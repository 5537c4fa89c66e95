"""
The record printed in JSON mode.

Field order is part of the output format: ``path``, ``short``, ``root``.
"""

from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field

from bwd.core.formatter import lossy_text, shorten_path, to_forward_slashes
from bwd.core.root_finder import ROOT_PLACEHOLDER


class OutputRecord(BaseModel):
    """Absolute, home-shortened and root-relative renderings of one path."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Absolute path")
    short: str = Field(..., description="Path with the home prefix replaced by a token")
    root: str = Field(
        default=ROOT_PLACEHOLDER,
        description="Path relative to the project root, '.' when there is none",
    )

    @classmethod
    def build(cls, path: PurePath, home: PurePath, root: str = ROOT_PLACEHOLDER) -> "OutputRecord":
        return cls(
            path=lossy_text(str(path)),
            short=lossy_text(shorten_path(path, home)),
            root=lossy_text(root),
        )

    def with_forward_slashes(self) -> "OutputRecord":
        return self.model_copy(
            update={
                "path": to_forward_slashes(self.path),
                "short": to_forward_slashes(self.short),
                "root": to_forward_slashes(self.root),
            }
        )

    def to_json(self) -> str:
        """Compact single-line JSON, e.g. ``{"path":"/a/b","short":"/a/b","root":"b"}``."""
        return self.model_dump_json()


def build_output_record(
    path: PurePath, home: PurePath, root: str = ROOT_PLACEHOLDER, forward_slashes: bool = False
) -> OutputRecord:
    record = OutputRecord.build(path, home, root)
    if forward_slashes:
        record = record.with_forward_slashes()
    return record
