"""Module: schedule."""

from sqlalchemy import JSON, Boolean, CheckConstraint, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vaxtrack.db.base import Base
from vaxtrack.db.models.vaccine import Vaccine


# Reference data: when a given dose of a vaccine is recommended and its acceptable age window.
class ScheduleEntry(Base):
    __tablename__ = "vaccination_schedules"
    __table_args__ = (
        UniqueConstraint("vaccine_id", "dose_number", name="uq_vaccination_schedules_dose"),
        CheckConstraint(
            "recommended_age_days >= age_range_start_days",
            name="ck_vaccination_schedules_recommended_after_start",
        ),
        CheckConstraint(
            "age_range_end_days IS NULL OR recommended_age_days <= age_range_end_days",
            name="ck_vaccination_schedules_recommended_before_end",
        ),
    )

    schedule_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    vaccine_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vaccines.vaccine_id", ondelete="CASCADE"),
        nullable=False
    )
    dose_number: Mapped[int] = mapped_column(Integer, nullable=False)
    age_group: Mapped[str] = mapped_column(String, nullable=True)

    recommended_age_days: Mapped[int] = mapped_column(Integer, nullable=False)
    age_range_start_days: Mapped[int] = mapped_column(Integer, nullable=False)
    # NULL means the window never closes.
    age_range_end_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    interval_from_previous_days: Mapped[int | None] = mapped_column(Integer, nullable=True)

    is_mandatory: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    priority_level: Mapped[str] = mapped_column(String, nullable=False, default="medium")
    notes: Mapped[dict] = mapped_column(JSON, nullable=True)

    vaccine: Mapped[Vaccine] = relationship(lazy="joined")
