"""Module: reminder."""

from datetime import date, datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vaxtrack.db.base import Base


# Scheduled notification for an upcoming dose. Rows are transitioned, never deleted.
class Reminder(Base):
    __tablename__ = "vaccination_reminders"

    reminder_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    patient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("patients.patient_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    vaccine_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vaccines.vaccine_id"),
        nullable=False
    )
    dose_number: Mapped[int] = mapped_column(Integer, nullable=False)

    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    reminder_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    reminder_type: Mapped[str] = mapped_column(String(16), nullable=False, default="due")
    priority: Mapped[str] = mapped_column(String(16), nullable=False, default="medium")
    language: Mapped[str] = mapped_column(String(8), nullable=False, default="en")

    # Message text rendered once at schedule time, keyed by language.
    message_templates: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    # Delivery lifecycle
    delivery_status: Mapped[str] = mapped_column(String(16), nullable=False, default="pending")
    sent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sent_at: Mapped[datetime] = mapped_column(DateTime, nullable=True)
    response_received: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    response_text: Mapped[str] = mapped_column(Text, nullable=True)
    rescheduled_date: Mapped[date] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
