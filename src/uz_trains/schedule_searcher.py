"""
Train Schedule Search Module

This module handles the search-filter-sort pipeline over the in-memory
train dataset. It's separate from the front ends so that the search is:
- Reusable from the console, the MCP server or as a library
- Easy to unit test against hand-built datasets
"""

import re
from collections.abc import Iterable
from operator import attrgetter
from pathlib import Path
from typing import Callable, Optional

from uz_trains.config import get_config
from uz_trains.dataset import load_dataset
from uz_trains.exceptions import (
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    MalformedArrivalStationError,
    MalformedDepartureStationError,
    SearchError,
    UnsupportedCriteriaError,
)
from uz_trains.logging import LogContext, get_logger
from uz_trains.models import Train

logger = get_logger(__name__)

# Maximum number of trains returned by a search
RESULT_LIMIT = 3

# Sort criteria and the Train attribute each one orders by
SORT_KEYS: dict[str, Callable[[Train], object]] = {
    "price": attrgetter("price"),
    "arrival-time": attrgetter("arrival_time"),
    "departure-time": attrgetter("departure_time"),
}

_STATION_PATTERN = re.compile(r"[+-]?[0-9]+")

# Largest station identifier accepted (signed 64-bit range)
MAX_STATION_ID = 2**63 - 1


def parse_station_id(
    value: str,
    empty_error: type[SearchError],
    malformed_error: type[SearchError],
) -> int:
    """
    Parse a station identifier typed by the user.

    Accepts an optional sign followed by ASCII digits; the value must lie
    between 0 and MAX_STATION_ID.

    Raises:
        empty_error: If value is empty
        malformed_error: If value is not a non-negative integer
    """
    if not value:
        raise empty_error()
    if not _STATION_PATTERN.fullmatch(value):
        raise malformed_error()
    try:
        station_id = int(value)
    except ValueError:
        # Longer than the interpreter will convert
        raise malformed_error()
    if station_id < 0 or station_id > MAX_STATION_ID:
        raise malformed_error()
    return station_id


class TrainSearcher:
    """
    Searches a read-only train dataset.

    The dataset is stored as a tuple of frozen records, so one searcher can
    serve concurrent readers without locking.
    """

    def __init__(self, trains: Iterable[Train]):
        """
        Initialize the searcher.

        Args:
            trains: Decoded trains, kept in the given order
        """
        self.trains: tuple[Train, ...] = tuple(trains)

    @classmethod
    def from_file(cls, data_file: Path | str) -> "TrainSearcher":
        """Load the dataset file and build a searcher over it."""
        return cls(load_dataset(data_file))

    def find_trains(self, departure_station: str, arrival_station: str, criteria: str) -> list[Train]:
        """
        Find trains between two stations, sorted by the given criteria.

        Args:
            departure_station: Departure station identifier as typed
            arrival_station: Arrival station identifier as typed
            criteria: One of "price", "arrival-time", "departure-time"

        Returns:
            Up to RESULT_LIMIT trains sorted ascending by criteria; equal keys
            keep dataset order. An empty list means no train runs between
            the stations.

        Raises:
            SearchError: If an input is empty, malformed or unsupported
        """
        with LogContext("find_trains", departure=departure_station, arrival=arrival_station, criteria=criteria):
            departure_id = parse_station_id(
                departure_station, EmptyDepartureStationError, MalformedDepartureStationError
            )
            arrival_id = parse_station_id(
                arrival_station, EmptyArrivalStationError, MalformedArrivalStationError
            )

            matches = [
                train for train in self.trains
                if train.departure_station_id == departure_id and train.arrival_station_id == arrival_id
            ]
            logger.debug(f"{len(matches)} train(s) run from {departure_id} to {arrival_id}")

            # Criteria is only checked once filtering is done
            sort_key = SORT_KEYS.get(criteria)
            if sort_key is None:
                raise UnsupportedCriteriaError(criteria)

            return sorted(matches, key=sort_key)[:RESULT_LIMIT]


# Process-wide searcher (loaded from the configured dataset on first use)
_searcher: Optional[TrainSearcher] = None


def get_searcher(data_file: Path | str | None = None) -> TrainSearcher:
    """
    Get or create the global TrainSearcher instance.

    Args:
        data_file: Dataset to load (defaults to the configured data_file,
                   only used on first call)

    Returns:
        TrainSearcher singleton instance

    Raises:
        DatasetError: If the dataset cannot be loaded
    """
    global _searcher

    if _searcher is None:
        _searcher = TrainSearcher.from_file(data_file or get_config().data_file)

    return _searcher


def reset_searcher() -> None:
    """Drop the cached searcher (useful for testing)."""
    global _searcher
    _searcher = None


def search(departure_station: str, arrival_station: str, criteria: str) -> list[Train]:
    """Run find_trains over the process-wide dataset."""
    return get_searcher().find_trains(departure_station, arrival_station, criteria)
