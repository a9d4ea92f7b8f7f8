"""Text rendering of search outcomes shared by the console and MCP front ends."""

from uz_trains.exceptions import SearchError
from uz_trains.models import TIME_LAYOUT, Train
from uz_trains.schedule_searcher import TrainSearcher

RULE = "-" * 62


def format_train(train: Train) -> str:
    """Render one train as a single result line."""
    return (
        f"TrainID: {train.train_id} "
        f"DepartureStationID: {train.departure_station_id} "
        f"ArrivalStationID: {train.arrival_station_id}  "
        f"Price: {train.price:0.2f} "
        f"ArrivalTime: {train.arrival_time.strftime(TIME_LAYOUT)} "
        f"DepartureTime: {train.departure_time.strftime(TIME_LAYOUT)}"
    )


NO_TRAINS = "No trains run between the given stations."


def render_results(trains: list[Train]) -> str:
    """Render a successful search, including the empty one."""
    story = "SEARCH RESULTS\n"
    story += f"{RULE}\n"

    if not trains:
        story += f"{NO_TRAINS}\n"

    for train in trains:
        story += format_train(train) + "\n"

    story += f"{RULE}\n"
    return story


def render_error(error: SearchError) -> str:
    """Render a rejected search."""
    story = "ERROR\n"
    story += f"{RULE}\n"
    story += f"{error}\n"
    story += f"{RULE}\n"
    return story


def render_search(
    searcher: TrainSearcher,
    departure_station: str,
    arrival_station: str,
    criteria: str,
) -> str:
    """
    Run a search and render its outcome.

    Search errors are rendered into the report rather than raised.

    Returns:
        Multi-line report text
    """
    try:
        trains = searcher.find_trains(departure_station, arrival_station, criteria)
    except SearchError as e:
        return render_error(e)
    return render_results(trains)
