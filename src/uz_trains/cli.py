"""
Interactive console for the UZ train search.

Asks for the departure station, the arrival station and the sort criteria
(any of them may instead be passed as arguments), then prints up to three
matching trains.
"""

import sys
from typing import Callable, Optional, Sequence

from dotenv import load_dotenv

from uz_trains.exceptions import DatasetError, SearchError
from uz_trains.logging import get_logger, setup_logging
from uz_trains.reports import render_error, render_results
from uz_trains.schedule_searcher import SORT_KEYS, get_searcher

logger = get_logger(__name__)

BANNER = "----------- UZ Train Information System -----------"

PROMPTS = (
    "Choose the departure station",
    "Choose the arrival station",
    f"Choose the criteria to sort results by ({', '.join(SORT_KEYS)})",
)


def read_token(prompt: str, read: Callable[[str], str] = input) -> str:
    """
    Prompt for one value.

    Only the first whitespace-delimited word is kept and surrounding double
    quotes are stripped, so '"1902"' and '1902 extra' both read as 1902.
    """
    print(prompt)
    try:
        words = read("> ").split()
    except EOFError:
        return ""
    return words[0].strip('"') if words else ""


def main(argv: Optional[Sequence[str]] = None, read: Callable[[str], str] = input) -> int:
    """
    Run the console front end.

    Args:
        argv: Up to three values (departure, arrival, criteria) that skip
              the matching prompts; defaults to sys.argv[1:]
        read: Line reader used for prompts

    Returns:
        Process exit status
    """
    load_dotenv()
    setup_logging()

    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > len(PROMPTS):
        print("usage: uz-trains [DEPARTURE [ARRIVAL [CRITERIA]]]", file=sys.stderr)
        return 2

    try:
        searcher = get_searcher()
    except DatasetError as e:
        logger.critical(f"Could not load train dataset: {e}")
        return 1

    print(BANNER)
    values = [arg.strip('"') for arg in args]
    for prompt in PROMPTS[len(values):]:
        values.append(read_token(prompt, read))

    departure_station, arrival_station, criteria = values

    try:
        trains = searcher.find_trains(departure_station, arrival_station, criteria)
    except SearchError as e:
        print(render_error(e), end="")
        return 1

    print(render_results(trains), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
