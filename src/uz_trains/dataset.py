"""
Train dataset loading.

Reads the raw JSON dataset (conventionally data.json), checks that it is
valid JSON and decodes every element into a Train. All failures raise
DatasetError subclasses; deciding to terminate is left to the entry points.
"""

import json
from pathlib import Path

from uz_trains.exceptions import (
    DatasetFormatError,
    DatasetNotFoundError,
    DatasetReadError,
    InvalidDatasetJSONError,
    RecordDecodeError,
)
from uz_trains.logging import get_logger
from uz_trains.models import Train, decode_train

logger = get_logger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_dataset(raw: bytes) -> tuple[Train, ...]:
    """
    Decode raw dataset bytes into an immutable sequence of trains.

    Args:
        raw: Full contents of the dataset source

    Returns:
        Tuple of trains in source order (duplicates preserved)

    Raises:
        InvalidDatasetJSONError: If raw is not syntactically valid JSON
        DatasetFormatError: If the top-level value is not an array of objects
        RecordDecodeError: If a record has a mistyped field
    """
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidDatasetJSONError(str(e)) from e

    if not isinstance(document, list):
        raise DatasetFormatError(
            f"unmarshal error: dataset must be a JSON array, got {type(document).__name__}"
        )

    trains = []
    for index, record in enumerate(document):
        try:
            trains.append(decode_train(record))
        except RecordDecodeError as e:
            logger.error(f"Record {index} rejected: {e}")
            raise

    return tuple(trains)


def load_dataset(path: Path | str) -> tuple[Train, ...]:
    """
    Read and decode the dataset file.

    Args:
        path: Path to the JSON dataset

    Returns:
        Tuple of trains in file order

    Raises:
        DatasetNotFoundError: If the file does not exist
        DatasetReadError: If the file cannot be read
        DatasetError: Any parse_dataset failure
    """
    path = Path(path)
    logger.info(f"Loading train dataset from {path}")

    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise DatasetNotFoundError(f"File doesn't exist: {path}") from e
    except OSError as e:
        raise DatasetReadError(f"Could not read {path}: {e}") from e

    trains = parse_dataset(raw)
    logger.info(f"Loaded {len(trains)} train(s) from {path}")
    return trains
