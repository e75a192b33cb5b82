#file: aq_dashboard/models.py

import re
from datetime import datetime
from typing import List, NamedTuple, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class PollutantOption(NamedTuple):
    kind: str
    label: str
    unit: str


POLLUTANTS = {
    "aqi" : PollutantOption("aqi", "AQI", ""),
    "pm25" : PollutantOption("pm25", "PM 2.5", "μg/m³"),
    "pm10" : PollutantOption("pm10", "PM 10", "μg/m³"),
}


class Station(BaseModel):
    model_config = ConfigDict(populate_by_name = True, frozen = True)

    id: str = Field(..., description = "Unique identifier of the station")
    sensor_id: str = Field(..., alias = "sensorId", description = "Sensor identifier used for history queries")
    name: str = Field(..., description = "Display name")
    lat: float = Field(..., description = "Latitude")
    lon: float = Field(..., alias = "lng", description = "Longitude")
    aqi: Optional[float] = Field(None, ge = 0, description = "Air Quality Index")
    pm25: Optional[float] = Field(None, ge = 0, description = "PM2.5 concentration (µg/m³)")
    pm10: Optional[float] = Field(None, ge = 0, description = "PM10 concentration (µg/m³)")
    sensor_type: Optional[str] = Field(None, alias = "sensorType", description = "Sensor hardware tag")
    timestamp: Optional[datetime] = Field(None, validation_alias = AliasChoices("timeStamp", "time", "timestamp"),
                                          description = "Time of the latest observation")

    @field_validator("id", "sensor_id", mode = "before")
    @classmethod
    def _as_string(cls, value):
        return str(value) if value is not None else value

    @field_validator("pm25", "pm10")
    @classmethod
    def _round_pm(cls, value):
        return round(value, 2) if value is not None else None

    def reading(self, kind: str) -> Optional[float]:
        """Latest reading for a pollutant kind; unknown kinds fall back to AQI."""
        if kind == "pm25" :
            return self.pm25
        if kind == "pm10" :
            return self.pm10
        return self.aqi


class HistoricalDataPoint(BaseModel):
    model_config = ConfigDict(populate_by_name = True, frozen = True)

    timestamp: datetime = Field(..., validation_alias = AliasChoices("timeStamp", "date", "timestamp"))
    aqi: Optional[float] = None
    pm25: Optional[float] = None
    pm10: Optional[float] = None
    avg_aqi: Optional[float] = None
    avg_pm25: Optional[float] = None
    avg_pm10: Optional[float] = None

    def value(self, kind: str) -> Optional[float]:
        """Aggregated average for ``kind`` when present, otherwise the raw reading."""
        if kind not in POLLUTANTS :
            kind = "aqi"
        average = getattr(self, f"avg_{kind}")
        return average if average is not None else getattr(self, kind)


class _ContactForm(BaseModel):
    name: str = Field(..., description = "Name of the person submitting the form")
    email: str = Field(..., description = "Contact email address")

    @field_validator("name")
    @classmethod
    def _name_required(cls, value: str) -> str:
        value = value.strip()
        if not value :
            raise ValueError("Name is required.")
        return value

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        value = value.strip()
        if not EMAIL_PATTERN.match(value) :
            raise ValueError("Enter a valid email address.")
        return value


class AlertSubscription(_ContactForm):
    sensors: List[str] = Field(..., description = "Sensor ids to receive alerts for")

    @field_validator("sensors")
    @classmethod
    def _sensors_required(cls, value: List[str]) -> List[str]:
        unique = list(dict.fromkeys(value))
        if not unique :
            raise ValueError("Select at least one sensor.")
        return unique


class Feedback(_ContactForm):
    message: str = Field(..., description = "Free-text feedback")
    rating: int = Field(..., description = "Star rating from 1 to 5")

    @field_validator("message")
    @classmethod
    def _message_required(cls, value: str) -> str:
        value = value.strip()
        if not value :
            raise ValueError("Feedback is required.")
        return value

    @field_validator("rating")
    @classmethod
    def _rating_range(cls, value: int) -> int:
        if not 1 <= value <= 5 :
            raise ValueError("Please select a rating.")
        return value
