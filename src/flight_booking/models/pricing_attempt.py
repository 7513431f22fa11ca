"""
PricingAttempt model - append-only log used as a sliding-window counter
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index

from flight_booking.core.database import Base


class PricingAttempt(Base):
    __tablename__ = "pricing_attempts"
    __table_args__ = (
        Index('ix_pricing_attempts_lookup', 'flight_id', 'user_key', 'attempt_time'),
    )

    id = Column(Integer, primary_key=True)
    flight_id = Column(Integer, ForeignKey("flights.id", ondelete="CASCADE"), nullable=False)
    user_key = Column(String(255), nullable=False)
    attempt_time = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<PricingAttempt(flight_id={self.flight_id}, user_key='{self.user_key}', at='{self.attempt_time}')>"
