"""Module: patient."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vaxtrack.db.base import Base


# Patient identity as registered by the enrollment flow; read-only to the vaccination core.
class Patient(Base):
    __tablename__ = "patients"

    patient_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String, nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String, nullable=True)
    language: Mapped[str] = mapped_column(String(8), nullable=False, default="en")

    # Audit
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow
    )
