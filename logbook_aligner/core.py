import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models import FileNamePattern
from .scanning.pattern import PatternInferrer
from .alignment.aligner import SequenceAligner
from .logbook.io import load_logbook, write_logbook
from .logbook.transforms import normalize_records, assign_image_numbers
from .metadata.writer import ExifToolWriter


@dataclass
class AlignmentResult:
    output_path: Path
    record_count: int
    pattern: FileNamePattern
    base_index: int


class LogbookAlignerApp:
    def __init__(self, exiftool: Optional[str] = None, show_progress: bool = True):
        self.inferrer = PatternInferrer()
        self.aligner = SequenceAligner(show_progress=show_progress)
        self.writer = ExifToolWriter(exiftool)

    def align(self, logbook_path: Path, sample_path: Path) -> AlignmentResult:
        """
        Runs the alignment pipeline:
        1. Load the logbook
        2. Clean Model / LensModel / Software
        3. Number the records
        4. Infer the file naming pattern from the sample
        5. Pair every record with its file
        6. Write <logbook>_new.json

        Any failure aborts before step 6, so no partial logbook is ever written.
        """
        records = load_logbook(logbook_path)
        records = normalize_records(records)
        records = assign_image_numbers(records)

        pattern, base_index = self.inferrer.infer(sample_path)
        records = self.aligner.align(records, pattern, base_index)

        output_path = write_logbook(logbook_path, records)
        return AlignmentResult(
            output_path=output_path,
            record_count=len(records),
            pattern=pattern,
            base_index=base_index,
        )

    def merge(self, result: AlignmentResult, dry_run: bool = False) -> int:
        """Hands the aligned logbook to exiftool. Returns its exit status."""
        logging.info(f"Merging {result.output_path} into {result.pattern.directory}...")
        return self.writer.write(result.output_path, result.pattern.directory, dry_run=dry_run)
