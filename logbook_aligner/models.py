from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from .exceptions import PatternError

# A single frame from the logbook. Opaque key/value metadata; only a handful
# of keys (see config) are rewritten.
LogbookRecord = Dict[str, Any]
LogbookSequence = List[LogbookRecord]


@dataclass(frozen=True)
class FileNamePattern:
    """
    Describes the names of a directory of sequentially numbered files:
    prefix + zero-padded index + suffix.
    """
    directory: Path
    prefix: str
    index_width: int
    suffix: str

    def format_name(self, index: int) -> str:
        # zfill is a no-op once the numeral outgrows the width (9999 -> 10000)
        return f"{self.prefix}{str(index).zfill(self.index_width)}{self.suffix}"

    def path_for(self, index: int) -> Path:
        return self.directory / self.format_name(index)

    def parse_index(self, name: str) -> int:
        """Extracts the numeric index field from a filename matching this pattern."""
        if not (name.startswith(self.prefix) and name.endswith(self.suffix)):
            raise PatternError(f"{name} does not match {self.prefix}*{self.suffix}")

        field = name[len(self.prefix):len(name) - len(self.suffix)]
        if not field.isdigit() or not field.isascii():
            raise PatternError(f"Index field {field!r} of {name} is not a number")
        return int(field, 10)
