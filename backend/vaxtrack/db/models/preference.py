"""Module: preference."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vaxtrack.db.base import Base


# Per-patient reminder preferences; exactly one row per patient (upserted).
class Preference(Base):
    __tablename__ = "vaccination_preferences"

    preference_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    patient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("patients.patient_id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    reminder_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    reminder_advance_days: Mapped[int] = mapped_column(Integer, nullable=False, default=7)
    preferred_reminder_time: Mapped[str] = mapped_column(String(8), nullable=False, default="10:00:00")
    language: Mapped[str] = mapped_column(String(8), nullable=False, default="en")
    notification_channels: Mapped[list] = mapped_column(JSON, nullable=False, default=lambda: ["whatsapp"])

    auto_schedule: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    privacy_consent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    data_sharing_consent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
