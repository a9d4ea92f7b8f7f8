"""
UZ Trains - train schedule lookup over a local JSON dataset.

Finds up to three trains between two stations, sorted by price,
arrival time or departure time.
"""

from .models import Train, decode_train
from .dataset import load_dataset, parse_dataset
from .schedule_searcher import RESULT_LIMIT, TrainSearcher, get_searcher, search
from .exceptions import (
    UZTrainsError,
    SearchError,
    EmptyDepartureStationError,
    MalformedDepartureStationError,
    EmptyArrivalStationError,
    MalformedArrivalStationError,
    UnsupportedCriteriaError,
    DatasetError,
    RecordDecodeError,
)

__version__ = "0.1.0"

__all__ = [
    "Train",
    "decode_train",
    "load_dataset",
    "parse_dataset",
    "RESULT_LIMIT",
    "TrainSearcher",
    "get_searcher",
    "search",
    "UZTrainsError",
    "SearchError",
    "EmptyDepartureStationError",
    "MalformedDepartureStationError",
    "EmptyArrivalStationError",
    "MalformedArrivalStationError",
    "UnsupportedCriteriaError",
    "DatasetError",
    "RecordDecodeError",
]
