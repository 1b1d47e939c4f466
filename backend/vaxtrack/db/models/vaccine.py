"""Module: vaccine."""

from sqlalchemy import JSON, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vaxtrack.db.base import Base


# Reference data: one row per vaccine product in the immunization catalog.
class Vaccine(Base):
    __tablename__ = "vaccines"

    vaccine_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)

    # Localized text is stored as {"en": ..., "hi": ..., "te": ...}.
    name: Mapped[dict] = mapped_column(JSON, nullable=False)
    description: Mapped[dict] = mapped_column(JSON, nullable=True)
    side_effects: Mapped[dict] = mapped_column(JSON, nullable=True)

    vaccine_type: Mapped[str] = mapped_column(String, nullable=True)
    route_of_administration: Mapped[str] = mapped_column(String, nullable=True)
    manufacturer: Mapped[str] = mapped_column(String, nullable=True)

    # Condition codes that rule this vaccine out, e.g. ["immunodeficiency", "pregnancy"].
    contraindications: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
