"""
Configuration constants for the logbook aligner.
"""

# --- Logbook Fields ---
MODEL_FIELD = 'Model'
LENS_MODEL_FIELD = 'LensModel'
SOFTWARE_FIELD = 'Software'
IMAGE_NUMBER_FIELD = 'ImageNumber'
SOURCE_FILE_FIELD = 'SourceFile'

# --- Output ---
# Aligned logbook is written next to the input as <stem><marker><ext>
OUTPUT_MARKER = "_new"
JSON_INDENT = 2
LOG_FILE_NAME = "logbook_aligner.log"

# --- Metadata Writer ---
EXIFTOOL_BIN = "exiftool"

# --- Operator Prompts ---
LOGBOOK_PROMPT = "[Drag/Drop json file]: "
SAMPLE_PROMPT = "[Drag/Drop Raw file]: "
MERGE_PROMPT = "[Merge Records with Files?  (Y/N)]: "
CONFIRM_ANSWERS = {'Y', 'y'}
