"""
Airline model
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from flight_booking.core.database import Base


class Airline(Base):
    __tablename__ = "airlines"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    code = Column(String(3), nullable=False, unique=True, index=True)
    logo_url = Column(String(500))

    flights = relationship("Flight", back_populates="airline")

    def __repr__(self):
        return f"<Airline(id={self.id}, code='{self.code}', name='{self.name}')>"
