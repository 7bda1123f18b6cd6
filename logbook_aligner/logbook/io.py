import json
import logging
from pathlib import Path

from .. import config
from ..models import LogbookSequence
from ..exceptions import LogbookFormatError


def load_logbook(path: Path) -> LogbookSequence:
    """
    Reads the whole logbook: a JSON array of per-frame objects.
    Any read or parse problem is fatal; nothing is defaulted.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise LogbookFormatError(f"Cannot read logbook {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise LogbookFormatError(f"Malformed logbook {path}: {e}") from e

    if not isinstance(data, list):
        raise LogbookFormatError(f"Logbook {path} must be a JSON array, got {type(data).__name__}")

    for position, record in enumerate(data):
        if not isinstance(record, dict):
            raise LogbookFormatError(f"Logbook {path}: entry {position} is not an object")

    logging.info(f"Loaded {len(data)} records from {path}")
    return data


def output_path_for(path: Path, marker: str = config.OUTPUT_MARKER) -> Path:
    """roll_12.json -> roll_12_new.json"""
    path = Path(path)
    return path.with_name(f"{path.stem}{marker}{path.suffix}")


def write_logbook(input_path: Path, records: LogbookSequence) -> Path:
    """Writes the aligned records next to the input; the input is never overwritten."""
    out_path = output_path_for(input_path)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=config.JSON_INDENT)

    logging.info(f"Wrote {len(records)} aligned records to {out_path}")
    return out_path
