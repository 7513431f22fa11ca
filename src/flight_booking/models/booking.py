"""
Booking model - one row per successful checkout, identified by its PNR
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, Enum, Boolean
from sqlalchemy.orm import relationship

from flight_booking.core.database import Base
from flight_booking.models.enums import BookingStatus, CabinClass, PaymentStatus


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    pnr = Column(String(6), nullable=False, unique=True, index=True)
    user_key = Column(String(255), nullable=False, index=True)  # 'user:<id>' or 'guest:...'
    flight_id = Column(Integer, ForeignKey("flights.id"), nullable=False, index=True)
    cabin_class = Column(Enum(CabinClass), nullable=False)
    status = Column(Enum(BookingStatus), nullable=False, default=BookingStatus.CONFIRMED, index=True)
    total_amount = Column(Numeric(10, 2), nullable=False)
    surge_applied = Column(Boolean, nullable=False, default=False)
    payment_status = Column(Enum(PaymentStatus), nullable=False, default=PaymentStatus.PENDING)
    payment_method = Column(String(50), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    cancelled_at = Column(DateTime, nullable=True)

    # Relationships
    flight = relationship("Flight", back_populates="bookings")
    passengers = relationship("Passenger", back_populates="booking", cascade="all, delete-orphan")

    def __repr__(self):
        return (f"<Booking(id={self.id}, pnr='{self.pnr}', flight_id={self.flight_id}, "
                f"status='{self.status.value}', total=${self.total_amount})>")

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    @property
    def seat_ids(self) -> list:
        return [p.seat_id for p in self.passengers if p.seat_id is not None]
