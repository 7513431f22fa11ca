"""
Flight model - catalog entry with per-cabin base fares and capacities
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, Enum
from sqlalchemy.orm import relationship

from flight_booking.core.database import Base
from flight_booking.models.enums import FlightStatus


class Flight(Base):
    __tablename__ = "flights"

    id = Column(Integer, primary_key=True, index=True)
    flight_number = Column(String(10), nullable=False, index=True)
    airline_id = Column(Integer, ForeignKey("airlines.id"), nullable=False, index=True)
    origin_airport_id = Column(Integer, ForeignKey("airports.id"), nullable=False, index=True)
    destination_airport_id = Column(Integer, ForeignKey("airports.id"), nullable=False, index=True)
    departure_time = Column(DateTime, nullable=False, index=True)
    arrival_time = Column(DateTime, nullable=False)

    # Base fares per passenger; business/first may be missing on legacy rows
    economy_price = Column(Numeric(10, 2), nullable=False)
    business_price = Column(Numeric(10, 2), nullable=True)
    first_class_price = Column(Numeric(10, 2), nullable=True)

    economy_seats = Column(Integer, nullable=False, default=0)
    business_seats = Column(Integer, nullable=False, default=0)
    first_class_seats = Column(Integer, nullable=False, default=0)

    aircraft_type = Column(String(50))
    status = Column(Enum(FlightStatus), nullable=False, default=FlightStatus.SCHEDULED, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    airline = relationship("Airline", back_populates="flights")
    origin_airport = relationship("Airport", foreign_keys=[origin_airport_id])
    destination_airport = relationship("Airport", foreign_keys=[destination_airport_id])
    seats = relationship("Seat", back_populates="flight", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="flight")

    def __repr__(self):
        return (f"<Flight(id={self.id}, number='{self.flight_number}', "
                f"departure='{self.departure_time}', status='{self.status.value}')>")

    @property
    def is_bookable(self) -> bool:
        return self.status == FlightStatus.SCHEDULED

    @property
    def total_seats(self) -> int:
        return (self.economy_seats or 0) + (self.business_seats or 0) + (self.first_class_seats or 0)
