"""Module: vaccination_record."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from vaxtrack.db.base import Base


# One administered dose. The unique constraint is the only duplicate guard.
class VaccinationRecord(Base):
    __tablename__ = "vaccination_records"
    __table_args__ = (
        UniqueConstraint("patient_id", "vaccine_id", "dose_number", name="uq_vaccination_records_dose"),
    )

    record_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

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

    vaccination_date: Mapped[date] = mapped_column(Date, nullable=False)
    administered_by: Mapped[str] = mapped_column(String(255), nullable=True)
    vaccination_center: Mapped[str] = mapped_column(String(255), nullable=True)
    batch_number: Mapped[str] = mapped_column(String(100), nullable=True)
    expiry_date: Mapped[date] = mapped_column(Date, nullable=True)
    adverse_events: Mapped[str] = mapped_column(Text, nullable=True)
    next_dose_due_date: Mapped[date] = mapped_column(Date, nullable=True)

    # Audit
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
