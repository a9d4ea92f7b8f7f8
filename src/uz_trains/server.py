"""
UZ Train Search MCP Server.

Exposes the train search as an MCP tool over stdio.
"""

import sys
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from uz_trains.exceptions import DatasetError
from uz_trains.logging import get_logger, setup_logging
from uz_trains.reports import render_search
from uz_trains.schedule_searcher import TrainSearcher, get_searcher

logger = get_logger(__name__)

# ============================================================================
# 1. Configuration & Setup
# ============================================================================

# Create the MCP server
mcp = FastMCP("UZ Train Search")

# Set by initialize() before the server starts
searcher: Optional[TrainSearcher] = None


# ============================================================================
# 2. MCP Tools
# ============================================================================


def search_trains(departure_station: str, arrival_station: str, criteria: str = "price") -> str:
    """
    Search for trains between two stations, cheapest or earliest first.

    Args:
        departure_station: Departure station identifier (e.g., "1902")
        arrival_station: Arrival station identifier (e.g., "1929")
        criteria: Sort order, one of "price", "arrival-time", "departure-time"

    Returns:
        Formatted string with up to three matching trains, or the reason the
        search was rejected.
    """
    story = "===================================\n"
    story += "    UZ TRAIN SEARCH\n"
    story += "===================================\n\n"
    story += f"From station {departure_station} to station {arrival_station}, sorted by {criteria}\n\n"
    story += render_search(searcher or get_searcher(), departure_station, arrival_station, criteria)
    story += "\n===================================\n"
    return story


mcp.tool()(search_trains)


# ============================================================================
# 3. Server Startup
# ============================================================================


def initialize() -> None:
    """Load configuration and the train dataset."""
    global searcher

    load_dotenv()
    setup_logging()
    searcher = get_searcher()
    logger.info(f"Serving {len(searcher.trains)} train(s)")


def main() -> int:
    try:
        initialize()
    except DatasetError as e:
        logger.critical(f"Could not load train dataset: {e}")
        return 1

    mcp.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
