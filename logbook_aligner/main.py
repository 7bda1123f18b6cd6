import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config
from .core import LogbookAlignerApp
from .exceptions import LogbookAlignerError

def setup_logging(log_dir: Path, verbose: bool):
    """Sets up logging to both console and a file next to the logbook."""
    log_level = logging.DEBUG if verbose else logging.INFO
    log_file = log_dir / config.LOG_FILE_NAME

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Logbook Aligner: match logbook frames to raw files and embed them")

    p.add_argument("logbook", type=Path, nargs="?", help="Logbook JSON file (prompted if omitted)")
    p.add_argument("sample", type=Path, nargs="?", help="Any raw file of the roll; alignment starts at its lowest-numbered file (prompted if omitted)")

    p.add_argument("-y", "--yes", action="store_true", help="Merge without asking for confirmation")
    p.add_argument("--no-merge", action="store_true", help="Only write the aligned JSON, never run exiftool")
    p.add_argument("--dry-run", action="store_true", help="Log the exiftool command instead of running it")
    p.add_argument("--exiftool", type=str, default=None, help=f"Path to exiftool (default: {config.EXIFTOOL_BIN} on PATH)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)

def clean_dropped_path(raw: str) -> Path:
    """Terminals quote dragged-and-dropped paths; strip that and any whitespace."""
    return Path(raw.strip().strip('"').strip("'"))

def ask_path(prompt: str, given: Optional[Path]) -> Path:
    if given is not None:
        return given
    return clean_dropped_path(input(prompt))

def confirm_merge() -> bool:
    return input(config.MERGE_PROMPT).strip() in config.CONFIRM_ANSWERS

def main(argv=None):
    args = parse_args(argv)

    # 1. Operator input
    try:
        logbook_path = ask_path(config.LOGBOOK_PROMPT, args.logbook).resolve()
        sample_path = ask_path(config.SAMPLE_PROMPT, args.sample).resolve()
    except (KeyboardInterrupt, EOFError):
        print("Cancelled.")
        sys.exit(1)

    log_dir = logbook_path.parent if logbook_path.parent.is_dir() else Path.cwd()
    setup_logging(log_dir, args.verbose)

    logging.info("=== Logbook Aligner Started ===")
    logging.info(f"Logbook: {logbook_path}")
    logging.info(f"Sample:  {sample_path}")

    # 2. Alignment
    app = LogbookAlignerApp(exiftool=args.exiftool)
    try:
        result = app.align(logbook_path, sample_path)
    except LogbookAlignerError as e:
        logging.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error during alignment.")
        sys.exit(1)

    logging.info(f"{result.record_count} photos are aligned with JSON records...")

    # 3. Merge
    if args.no_merge:
        logging.info(f"Skipping merge. Aligned logbook: {result.output_path}")
        return

    try:
        if not (args.yes or confirm_merge()):
            logging.info(f"Merge declined. Aligned logbook kept at {result.output_path}")
            return
        status = app.merge(result, dry_run=args.dry_run)
    except LogbookAlignerError as e:
        logging.error(str(e))
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        logging.warning("Operation cancelled by user.")
        sys.exit(1)

    if status != 0:
        sys.exit(1)
    logging.info("Merge complete.")

if __name__ == "__main__":
    main()
