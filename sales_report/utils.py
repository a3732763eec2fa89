import logging
from datetime import date, datetime
from pathlib import Path
import pandas as pd

logger = logging.getLogger(__name__)


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def find_latest_report(directory: Path, prefix: str) -> tuple[Path, date] | None:
    """
    Finds the most recently modified '<prefix>*.csv' file in a directory.
    Returns the path together with the file's modification date, or None.
    """
    if not directory.is_dir():
        logger.warning(f"Input directory not found: {directory}")
        return None

    candidates = [p for p in directory.glob(f"{prefix}*.csv") if p.is_file()]
    if not candidates:
        return None

    latest = max(candidates, key=lambda p: p.stat().st_mtime)
    return latest, date.fromtimestamp(latest.stat().st_mtime)


def load_csv(file_path: Path, **read_kwargs) -> pd.DataFrame | None:
    """
    A more robust CSV loader with a multi-stage encoding fallback.
    It will attempt to read a file in the following order:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1 - A permissive fallback that never fails but might misinterpret characters.
    """
    try:
        return pd.read_csv(file_path, encoding="utf-8-sig", **read_kwargs)

    except UnicodeDecodeError:
        logger.info(
            f"INFO: UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'."
        )
        try:
            return pd.read_csv(file_path, encoding="latin-1", **read_kwargs)
        except (OSError, ValueError) as e_latin1:
            logger.error(
                f"ERROR: Could not read {file_path.name} even with latin-1. Reason: {e_latin1}"
            )
            return None

    except FileNotFoundError:
        logger.info(f"INFO: Report not found at {file_path}, skipping.")
        return None

    except (OSError, ValueError) as e_general:
        # pandas parser errors (ParserError, EmptyDataError) are ValueErrors.
        logger.error(
            f"ERROR: An unexpected error occurred while reading {file_path.name}. Reason: {e_general}"
        )
        return None
