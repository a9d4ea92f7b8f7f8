"""Train record model and the tolerant JSON record decoder."""

import re
from collections.abc import Mapping
from datetime import datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from uz_trains.exceptions import DatasetFormatError, RecordDecodeError

# Layout of arrivalTime/departureTime values in the dataset
TIME_LAYOUT = "%H:%M:%S"

# Minutes and seconds are always two digits
_TIME_PATTERN = re.compile(r"[0-9]{1,2}:[0-9]{2}:[0-9]{2}")


def _require_number(value: Any) -> int | float:
    # bool is an int subclass but true/false are not JSON numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("expected a number")
    return value


class Train(BaseModel):
    """A single scheduled train between two stations."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    train_id: int = Field(default=0, alias="trainId", description="Train number")
    departure_station_id: int = Field(
        default=0, alias="departureStationId", description="Departure station identifier"
    )
    arrival_station_id: int = Field(
        default=0, alias="arrivalStationId", description="Arrival station identifier"
    )
    price: float = Field(default=0.0, alias="price", description="Ticket price")
    arrival_time: time = Field(default=time(0, 0, 0), alias="arrivalTime", description="Arrival time of day")
    departure_time: time = Field(
        default=time(0, 0, 0), alias="departureTime", description="Departure time of day"
    )

    @field_validator("train_id", "departure_station_id", "arrival_station_id", mode="before")
    @classmethod
    def validate_identifier(cls, v: Any) -> int:
        number = _require_number(v)
        try:
            return int(number)
        except (ValueError, OverflowError):
            raise ValueError("expected a finite number")

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v: Any) -> float:
        return float(_require_number(v))

    @field_validator("arrival_time", "departure_time", mode="before")
    @classmethod
    def validate_time(cls, v: Any) -> time:
        if isinstance(v, time):
            return v
        if not isinstance(v, str):
            raise ValueError("expected a HH:MM:SS string")
        if not _TIME_PATTERN.fullmatch(v):
            raise ValueError(f"{v!r} does not match HH:MM:SS")
        return datetime.strptime(v, TIME_LAYOUT).time()

    def to_dict(self) -> dict:
        """Convert to the dataset's JSON representation."""
        return {
            "trainId": self.train_id,
            "departureStationId": self.departure_station_id,
            "arrivalStationId": self.arrival_station_id,
            "price": self.price,
            "arrivalTime": self.arrival_time.strftime(TIME_LAYOUT),
            "departureTime": self.departure_time.strftime(TIME_LAYOUT),
        }


def decode_train(raw: Any) -> Train:
    """
    Decode one untyped JSON object into a Train.

    Only the six camelCase dataset keys are read; anything else is ignored.
    Absent fields keep their zero value, and a JSON null decodes to an
    all-zero train.

    Args:
        raw: A decoded JSON value, expected to be an object

    Returns:
        The decoded Train

    Raises:
        DatasetFormatError: If raw is not a JSON object
        RecordDecodeError: If a field has the wrong type or an unparsable time,
            naming the field by its JSON key
    """
    if raw is None:
        return Train()
    if not isinstance(raw, Mapping):
        raise DatasetFormatError(
            f"unmarshal error: train record must be an object, got {type(raw).__name__}"
        )

    try:
        return Train.model_validate(dict(raw))
    except ValidationError as e:
        # loc carries the alias, which is the JSON key
        field = str(e.errors()[0]["loc"][0])
        raise RecordDecodeError(field) from e
