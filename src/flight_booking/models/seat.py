"""
Seat model - one row per physical seat on a flight

Availability is only flipped by the seat allocator, through a conditional
UPDATE guarded by is_available.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, Enum, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship

from flight_booking.core.database import Base
from flight_booking.models.enums import CabinClass


class Seat(Base):
    __tablename__ = "seats"
    __table_args__ = (
        UniqueConstraint('flight_id', 'seat_number', name='uq_flight_seat_number'),
    )

    id = Column(Integer, primary_key=True, index=True)
    flight_id = Column(Integer, ForeignKey("flights.id", ondelete="CASCADE"), nullable=False, index=True)
    seat_number = Column(String(4), nullable=False)  # '12A'
    cabin_class = Column(Enum(CabinClass), nullable=False, index=True)
    is_available = Column(Boolean, nullable=False, default=True, index=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)  # Surcharge on top of the fare
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    flight = relationship("Flight", back_populates="seats")

    def __repr__(self):
        return (f"<Seat(id={self.id}, flight_id={self.flight_id}, seat='{self.seat_number}', "
                f"class='{self.cabin_class.value}', available={self.is_available})>")
