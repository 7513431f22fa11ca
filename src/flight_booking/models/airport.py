"""
Airport model
"""
from sqlalchemy import Column, Integer, String

from flight_booking.core.database import Base


class Airport(Base):
    __tablename__ = "airports"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    code = Column(String(3), nullable=False, unique=True, index=True)  # IATA code
    city = Column(String(100), nullable=False, index=True)
    country = Column(String(100), nullable=False)
    timezone = Column(String(64))

    def __repr__(self):
        return f"<Airport(id={self.id}, code='{self.code}', city='{self.city}')>"
