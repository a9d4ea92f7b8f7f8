"""Custom exceptions for the UZ train search."""


class UZTrainsError(Exception):
    """Base exception for all UZ train search errors."""
    pass


# ============================================================================
# Search input errors (returned to the caller)
# ============================================================================


class SearchError(UZTrainsError):
    """Raised when a search request is rejected."""
    pass


class EmptyDepartureStationError(SearchError):
    """Raised when no departure station was given."""

    def __init__(self):
        super().__init__("empty departure station")


class MalformedDepartureStationError(SearchError):
    """Raised when the departure station is not a non-negative integer."""

    def __init__(self):
        super().__init__("bad departure station input")


class EmptyArrivalStationError(SearchError):
    """Raised when no arrival station was given."""

    def __init__(self):
        super().__init__("empty arrival station")


class MalformedArrivalStationError(SearchError):
    """Raised when the arrival station is not a non-negative integer."""

    def __init__(self):
        super().__init__("bad arrival station input")


class UnsupportedCriteriaError(SearchError):
    """Raised when results cannot be sorted by the requested criteria."""

    def __init__(self, criteria: str):
        self.criteria = criteria
        super().__init__("unsupported criteria")


# ============================================================================
# Dataset errors (fatal at start-up)
# ============================================================================


class DatasetError(UZTrainsError):
    """Raised when the train dataset cannot be loaded."""
    pass


class DatasetNotFoundError(DatasetError):
    """Raised when the dataset file does not exist."""
    pass


class DatasetReadError(DatasetError):
    """Raised when the dataset file exists but cannot be read."""
    pass


class InvalidDatasetJSONError(DatasetError):
    """Raised when the dataset is not syntactically valid JSON."""

    def __init__(self, detail: str = ""):
        message = "JSON is invalid"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DatasetFormatError(DatasetError):
    """Raised when the dataset is valid JSON but not an array of trains."""
    pass


class RecordDecodeError(DatasetError):
    """Raised when a single train record has a mistyped or unparsable field."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"bad parse {field}")
