from pydantic import BaseModel, EmailStr, field_validator, model_validator
from datetime import date, time

from room_booking.utils.interval import TimeInterval


class BookingRequest(BaseModel):
    """Body of both create and update; shape checks only, rules live in the services."""
    roomName:      str
    employeeEmail: EmailStr
    date:          date
    startTime:     time
    endTime:       time

    @field_validator("roomName")
    @classmethod
    def check_room_name(cls, v):
        if not v.strip(): raise ValueError("Room name is required")
        return v.strip()

    @field_validator("startTime", "endTime")
    @classmethod
    def check_naive_time(cls, v):
        # Bookings live in the service's single local zone
        if v.tzinfo is not None:
            raise ValueError("Times must not carry a UTC offset")
        return v

    @model_validator(mode="after")
    def check_times(self) -> "BookingRequest":
        if self.startTime >= self.endTime:
            raise ValueError("Start time must be before end time.")
        return self

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval(self.date, self.startTime, self.endTime)
