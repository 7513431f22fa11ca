"""Pydantic schemas for Booking resources"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from flight_booking.models.enums import BookingStatus, CabinClass, PaymentStatus
from flight_booking.schemas.base import CamelModel


class PassengerCreate(CamelModel):
    title: Optional[str] = Field(None, max_length=10)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    passport_number: Optional[str] = Field(None, max_length=20)

    @field_validator('date_of_birth')
    @classmethod
    def not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("date of birth cannot be in the future")
        return v


class BookingCreate(CamelModel):
    flight_id: int = Field(..., gt=0)
    cabin_class: CabinClass = CabinClass.ECONOMY
    passengers: List[PassengerCreate] = Field(..., min_length=1)
    seat_ids: List[int] = Field(default_factory=list)
    payment_method: str = Field(..., min_length=1, max_length=50)


class PassengerResponse(CamelModel):
    id: int
    title: Optional[str] = None
    first_name: str
    last_name: str
    date_of_birth: date
    passport_number: Optional[str] = None
    seat_id: Optional[int] = None
    seat_number: Optional[str] = None

    @classmethod
    def from_passenger(cls, passenger):
        return cls(
            id=passenger.id,
            title=passenger.title,
            first_name=passenger.first_name,
            last_name=passenger.last_name,
            date_of_birth=passenger.date_of_birth,
            passport_number=passenger.passport_number,
            seat_id=passenger.seat_id,
            seat_number=passenger.seat.seat_number if passenger.seat else None,
        )


class PriceBreakdownResponse(CamelModel):
    base_fare: Decimal
    passenger_count: int
    seat_surcharges: Decimal
    subtotal: Decimal
    taxes: Decimal
    surge_multiplier: Decimal
    total: Decimal


class BookingResponse(CamelModel):
    id: int
    pnr: str
    user_key: str
    flight_id: int
    cabin_class: CabinClass
    status: BookingStatus
    total_amount: Decimal
    surge_applied: bool
    payment_status: PaymentStatus
    payment_method: Optional[str] = None
    created_at: datetime
    cancelled_at: Optional[datetime] = None
    passengers: List[PassengerResponse] = Field(default_factory=list)
    price_breakdown: Optional[PriceBreakdownResponse] = None

    @classmethod
    def from_booking(cls, booking, breakdown=None):
        """Convert Booking ORM model (passengers and seats loaded) to response"""
        return cls(
            id=booking.id,
            pnr=booking.pnr,
            user_key=booking.user_key,
            flight_id=booking.flight_id,
            cabin_class=booking.cabin_class,
            status=booking.status,
            total_amount=booking.total_amount,
            surge_applied=booking.surge_applied,
            payment_status=booking.payment_status,
            payment_method=booking.payment_method,
            created_at=booking.created_at,
            cancelled_at=booking.cancelled_at,
            passengers=[PassengerResponse.from_passenger(p) for p in booking.passengers],
            price_breakdown=PriceBreakdownResponse(**breakdown.as_dict()) if breakdown else None,
        )


class BookingListResponse(CamelModel):
    bookings: List[BookingResponse]
    total: int


class CancellationResponse(CamelModel):
    message: str
    booking_id: int
    status: BookingStatus
    released_seats: int = 0
