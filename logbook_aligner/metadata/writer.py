import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from .. import config
from ..exceptions import MetadataWriteError


class ExifToolWriter:
    """
    Wraps the 'exiftool' command line utility.
    Must be installed and on the system PATH (or passed explicitly).

    exiftool matches each JSON record to an image through its SourceFile
    field, so the aligned logbook can be applied to the whole directory at once.
    """

    def __init__(self, executable: Optional[str] = None):
        self.executable = executable or config.EXIFTOOL_BIN

    def resolve(self) -> str:
        found = shutil.which(self.executable)
        if found is None:
            raise MetadataWriteError(f"exiftool not found: {self.executable}")
        return found

    def build_command(self, json_path: Path, directory: Path) -> List[str]:
        return [self.executable, f"-json={json_path}", str(directory)]

    def write(self, json_path: Path, directory: Path, dry_run: bool = False) -> int:
        """
        Embeds the records of json_path into the images of directory.
        Returns exiftool's exit status; failures are reported, not retried.
        """
        cmd = self.build_command(json_path, directory)
        if dry_run:
            logging.info(f"[DRY RUN] {' '.join(cmd)}")
            return 0

        cmd[0] = self.resolve()
        logging.info(' '.join(cmd))

        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise MetadataWriteError(f"Failed to run {cmd[0]}: {e}") from e

        if result.returncode != 0:
            logging.error(f"exiftool exited with status {result.returncode}")
        return result.returncode
