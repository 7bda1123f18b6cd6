import logging
from tqdm import tqdm

from .. import config
from ..models import FileNamePattern, LogbookSequence
from ..exceptions import MissingFileError


class SequenceAligner:
    """
    Pairs each logbook record with the raw file holding its frame.

    Record i belongs to the file numbered base_index + i. A gap in the
    numbering is treated as a missing file.
    """

    def __init__(self, show_progress: bool = True):
        self.show_progress = show_progress

    def align(self,
              records: LogbookSequence,
              pattern: FileNamePattern,
              base_index: int) -> LogbookSequence:
        """
        Returns new records with SourceFile and ImageNumber filled in.
        Raises MissingFileError for the first expected file that is absent;
        the input list is left untouched and nothing is returned.
        """
        logging.info(f"Aligning {len(records)} records starting at index {base_index}...")

        aligned: LogbookSequence = []
        for position, record in enumerate(tqdm(records, desc="Aligning", disable=not self.show_progress)):
            source_file = pattern.path_for(base_index + position)
            if not source_file.is_file():
                raise MissingFileError(source_file)

            logging.debug(f"Record {position} -> {source_file.name}")
            aligned.append({
                **record,
                config.SOURCE_FILE_FIELD: str(source_file),
                config.IMAGE_NUMBER_FIELD: position,
            })

        return aligned
