import os
import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from ..models import FileNamePattern
from ..exceptions import PatternError

DIGITS = "0123456789"


def list_candidates(directory: Path, extension: str) -> List[str]:
    """
    Names of the regular files directly inside `directory` whose extension is
    exactly `extension` (case-sensitive). Sorted for stable results.
    """
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise PatternError(f"Cannot list {directory}: {e}") from e

    names = [
        e.name for e in entries
        if e.is_file() and os.path.splitext(e.name)[1] == extension
    ]
    names.sort()
    return names


def common_prefix(names: Sequence[str]) -> str:
    """Longest leading substring shared by every name."""
    return os.path.commonprefix(list(names))


def common_suffix(names: Sequence[str]) -> str:
    """Longest trailing substring shared by every name."""
    reversed_names = [name[::-1] for name in names]
    return os.path.commonprefix(reversed_names)[::-1]


def widen_index_field(prefix: str, suffix: str) -> Tuple[str, str]:
    """
    Gives digits adjacent to the varying segment back to the index field.

    The common prefix of IMG_0001..IMG_0005 is "IMG_000"; the numeral
    really starts after "IMG_". Likewise 0010, 0020, 0030 share a trailing
    "0" that belongs to the index, not the suffix.
    """
    return prefix.rstrip(DIGITS), suffix.lstrip(DIGITS)


class PatternInferrer:
    """
    Derives the prefix / index / suffix layout shared by every file in a
    directory of sequentially numbered raw files, starting from one sample.
    """

    def infer(self, sample_path: Path) -> Tuple[FileNamePattern, int]:
        """
        Returns (pattern, base_index), where base_index is the numeral of the
        lowest-numbered file in the directory. Record 0 always maps to it,
        whichever file of the roll was given as the sample.
        """
        sample_path = Path(sample_path)
        if not sample_path.is_file():
            raise PatternError(f"Sample file {sample_path} does not exist")

        directory = sample_path.parent
        extension = sample_path.suffix
        names = list_candidates(directory, extension)
        logging.debug(f"Found {len(names)} '{extension}' files in {directory}")

        if len({len(name) for name in names}) != 1:
            raise PatternError(f"Non-uniform file names in {directory}, aborting...")

        if len(names) < 2:
            raise PatternError(
                f"Only one '{extension}' file in {directory}; "
                "cannot tell which part of the name is the index"
            )

        pattern = self._build_pattern(directory, names)
        self._check_round_trip(pattern, names)

        # names is sorted and fixed-width, so names[0] holds the lowest index
        base_index = pattern.parse_index(names[0])
        logging.info(
            f"Inferred pattern {pattern.prefix}{'#' * pattern.index_width}{pattern.suffix} "
            f"in {directory} (base index {base_index})"
        )
        return pattern, base_index

    def _build_pattern(self, directory: Path, names: List[str]) -> FileNamePattern:
        prefix = common_prefix(names)
        # Only look for the suffix after the prefix so the two never overlap
        suffix = common_suffix([name[len(prefix):] for name in names])
        prefix, suffix = widen_index_field(prefix, suffix)

        index_width = len(names[0]) - len(prefix) - len(suffix)
        return FileNamePattern(
            directory=directory,
            prefix=prefix,
            index_width=index_width,
            suffix=suffix,
        )

    def _check_round_trip(self, pattern: FileNamePattern, names: List[str]):
        """Every candidate must be reproducible from its own index."""
        for name in names:
            index = pattern.parse_index(name)
            if pattern.format_name(index) != name:
                raise PatternError(f"{name} does not fit the inferred pattern")
