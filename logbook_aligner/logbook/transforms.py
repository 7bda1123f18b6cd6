"""
Field clean-up applied to every logbook record before alignment.

Each function takes a record (or sequence) and returns a new one; inputs are
never mutated.
"""
import re

from .. import config
from ..models import LogbookRecord, LogbookSequence

# Optional spaces, the last "(" in the string, and everything after it
TRAILING_PARENS = re.compile(r' *\([^(]*$')


def trim_last_parentheses(text: str) -> str:
    """'Canon EOS R5 (Body)' -> 'Canon EOS R5'"""
    return TRAILING_PARENS.sub('', text)


def _trim_field(record: LogbookRecord, field: str) -> LogbookRecord:
    value = record.get(field)
    if not isinstance(value, str):
        return dict(record)
    return {**record, field: trim_last_parentheses(value)}


def clean_camera_model(record: LogbookRecord) -> LogbookRecord:
    return _trim_field(record, config.MODEL_FIELD)


def clean_lens_model(record: LogbookRecord) -> LogbookRecord:
    return _trim_field(record, config.LENS_MODEL_FIELD)


def clean_software(record: LogbookRecord) -> LogbookRecord:
    # The scanning app stamps its own name here; it does not describe the camera
    return {**record, config.SOFTWARE_FIELD: ''}


def normalize_records(records: LogbookSequence) -> LogbookSequence:
    return [
        clean_lens_model(clean_software(clean_camera_model(record)))
        for record in records
    ]


def assign_image_numbers(records: LogbookSequence) -> LogbookSequence:
    """ImageNumber becomes the record's 0-based position in the logbook."""
    return [
        {**record, config.IMAGE_NUMBER_FIELD: position}
        for position, record in enumerate(records)
    ]
