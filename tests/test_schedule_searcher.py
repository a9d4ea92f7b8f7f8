"""Tests for the search-filter-sort pipeline."""

import pytest

from uz_trains.exceptions import (
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    MalformedArrivalStationError,
    MalformedDepartureStationError,
    SearchError,
    UnsupportedCriteriaError,
)
from uz_trains.models import decode_train
from uz_trains.schedule_searcher import (
    MAX_STATION_ID,
    RESULT_LIMIT,
    SORT_KEYS,
    TrainSearcher,
    get_searcher,
    reset_searcher,
    search,
)

from conftest import SAMPLE_RECORDS


def make_train(train_id, price=100.0, arrival="12:00:00", departure="08:00:00", dep=1902, arr=1929):
    return decode_train({
        "trainId": train_id,
        "departureStationId": dep,
        "arrivalStationId": arr,
        "price": price,
        "arrivalTime": arrival,
        "departureTime": departure,
    })


@pytest.fixture
def searcher():
    return TrainSearcher(decode_train(record) for record in SAMPLE_RECORDS)


def test_two_trains_sorted_by_price():
    """The cheaper train comes first."""
    searcher = TrainSearcher([
        make_train(1177, price=164.65, arrival="10:25:00", departure="16:36:00"),
        make_train(1141, price=176.77, arrival="10:25:00", departure="16:48:00"),
    ])

    result = searcher.find_trains("1902", "1929", "price")

    assert [t.train_id for t in result] == [1177, 1141]


def test_price_search_on_sample(searcher):
    result = searcher.find_trains("1902", "1929", "price")

    assert [t.train_id for t in result] == [1177, 1178, 1141]


def test_result_is_capped_at_first_three_sorted(searcher):
    result = searcher.find_trains("1902", "1929", "departure-time")

    assert len(result) == RESULT_LIMIT
    assert [t.train_id for t in result] == [1140, 1177, 1178]


def test_arrival_time_sort_is_stable(searcher):
    """Trains arriving at the same time keep dataset order."""
    result = searcher.find_trains("1902", "1929", "arrival-time")

    assert [t.train_id for t in result] == [1140, 1177, 1178]


def test_equal_prices_keep_dataset_order():
    trains = [make_train(i, price=50.0) for i in (9, 3, 7, 1)]
    searcher = TrainSearcher(trains)

    result = searcher.find_trains("1902", "1929", "price")

    assert [t.train_id for t in result] == [9, 3, 7]


@pytest.mark.parametrize("criteria", sorted(SORT_KEYS))
def test_results_sorted_subsequence_of_matches(criteria):
    trains = [
        make_train(1, price=30, arrival="11:00:00", departure="07:00:00"),
        make_train(2, price=10, arrival="09:00:00", departure="09:30:00"),
        make_train(3, price=20, arrival="10:00:00", departure="06:00:00", arr=2000),
        make_train(4, price=10, arrival="08:00:00", departure="05:00:00"),
    ]
    searcher = TrainSearcher(trains)

    result = searcher.find_trains("1902", "1929", criteria)
    keys = [SORT_KEYS[criteria](t) for t in result]

    assert keys == sorted(keys)
    assert all(t.arrival_station_id == 1929 for t in result)
    assert len(result) == 3


def test_fewer_matches_than_cap(searcher):
    result = searcher.find_trains("1929", "1902", "price")

    assert [t.train_id for t in result] == [1153]


def test_no_matches_is_empty_success(searcher):
    assert searcher.find_trains("1", "2", "price") == []


def test_each_call_returns_fresh_list(searcher):
    first = searcher.find_trains("1902", "1929", "price")
    first.clear()

    second = searcher.find_trains("1902", "1929", "price")

    assert len(second) == 3
    assert len(searcher.trains) == len(SAMPLE_RECORDS)


def test_empty_departure_station(searcher):
    with pytest.raises(EmptyDepartureStationError) as exc_info:
        searcher.find_trains("", "1929", "price")

    assert str(exc_info.value) == "empty departure station"


@pytest.mark.parametrize("value", ["-5", "abc", "19 02", " 1902", "1.5", "1_902", "+"])
def test_malformed_departure_station(searcher, value):
    with pytest.raises(MalformedDepartureStationError) as exc_info:
        searcher.find_trains(value, "1929", "price")

    assert str(exc_info.value) == "bad departure station input"


def test_station_id_beyond_64_bits_is_malformed(searcher):
    with pytest.raises(MalformedDepartureStationError):
        searcher.find_trains("99999999999999999999", "1929", "price")
    with pytest.raises(MalformedArrivalStationError):
        searcher.find_trains("1902", str(MAX_STATION_ID + 1), "price")
    with pytest.raises(MalformedArrivalStationError):
        searcher.find_trains("1902", "9" * 5000, "price")


def test_largest_station_id_is_accepted(searcher):
    assert searcher.find_trains(str(MAX_STATION_ID), "1929", "price") == []


def test_signed_station_ids_are_accepted(searcher):
    assert [t.train_id for t in searcher.find_trains("+1902", "1929", "price")] == [1177, 1178, 1141]
    assert searcher.find_trains("-0", "0", "price") == []


def test_empty_arrival_station(searcher):
    with pytest.raises(EmptyArrivalStationError):
        searcher.find_trains("1902", "", "price")


def test_malformed_arrival_station(searcher):
    with pytest.raises(MalformedArrivalStationError) as exc_info:
        searcher.find_trains("1902", "-1929", "price")

    assert str(exc_info.value) == "bad arrival station input"


def test_departure_is_validated_before_arrival(searcher):
    with pytest.raises(EmptyDepartureStationError):
        searcher.find_trains("", "", "bogus")


def test_station_errors_take_precedence_over_criteria(searcher):
    with pytest.raises(MalformedArrivalStationError):
        searcher.find_trains("1902", "x", "bogus")


def test_unsupported_criteria_with_matches(searcher):
    with pytest.raises(UnsupportedCriteriaError) as exc_info:
        searcher.find_trains("1902", "1929", "bogus")

    assert str(exc_info.value) == "unsupported criteria"
    assert exc_info.value.criteria == "bogus"


def test_unsupported_criteria_without_matches(searcher):
    """An invalid criteria fails even when no train matches."""
    with pytest.raises(UnsupportedCriteriaError):
        searcher.find_trains("1", "2", "bogus")


def test_criteria_is_case_sensitive(searcher):
    with pytest.raises(SearchError):
        searcher.find_trains("1902", "1929", "Price")


def test_search_uses_configured_dataset(monkeypatch, sample_dataset):
    monkeypatch.setenv("UZ_TRAINS_DATA_FILE", str(sample_dataset))

    result = search("1902", "1929", "price")

    assert [t.train_id for t in result] == [1177, 1178, 1141]


def test_get_searcher_is_cached(sample_dataset):
    first = get_searcher(sample_dataset)

    assert get_searcher() is first

    reset_searcher()
    assert get_searcher(sample_dataset) is not first


def test_from_file(sample_dataset):
    searcher = TrainSearcher.from_file(sample_dataset)

    assert len(searcher.trains) == len(SAMPLE_RECORDS)
