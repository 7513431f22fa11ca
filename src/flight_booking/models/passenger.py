"""
Passenger model - one row per traveler on a booking, never updated
"""
from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship

from flight_booking.core.database import Base


class Passenger(Base):
    __tablename__ = "passengers"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(10))
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    passport_number = Column(String(20), nullable=True)
    seat_id = Column(Integer, ForeignKey("seats.id"), nullable=True, index=True)

    booking = relationship("Booking", back_populates="passengers")
    seat = relationship("Seat")

    def __repr__(self):
        return f"<Passenger(id={self.id}, booking_id={self.booking_id}, name='{self.full_name}')>"

    @property
    def full_name(self) -> str:
        parts = [self.title, self.first_name, self.last_name]
        return " ".join(p for p in parts if p)
