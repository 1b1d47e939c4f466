"""vaccination core tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "patients",
        sa.Column("patient_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("language", sa.String(length=8), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_patients_date_of_birth", "patients", ["date_of_birth"])

    op.create_table(
        "vaccines",
        sa.Column("vaccine_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(length=32), nullable=False),
        sa.Column("name", sa.JSON(), nullable=False),
        sa.Column("description", sa.JSON(), nullable=True),
        sa.Column("side_effects", sa.JSON(), nullable=True),
        sa.Column("vaccine_type", sa.String(), nullable=True),
        sa.Column("route_of_administration", sa.String(), nullable=True),
        sa.Column("manufacturer", sa.String(), nullable=True),
        sa.Column("contraindications", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("code", name="uq_vaccines_code"),
    )

    op.create_table(
        "vaccination_schedules",
        sa.Column("schedule_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("vaccine_id", sa.Integer(), sa.ForeignKey("vaccines.vaccine_id", ondelete="CASCADE"), nullable=False),
        sa.Column("dose_number", sa.Integer(), nullable=False),
        sa.Column("age_group", sa.String(), nullable=True),
        sa.Column("recommended_age_days", sa.Integer(), nullable=False),
        sa.Column("age_range_start_days", sa.Integer(), nullable=False),
        sa.Column("age_range_end_days", sa.Integer(), nullable=True),
        sa.Column("interval_from_previous_days", sa.Integer(), nullable=True),
        sa.Column("is_mandatory", sa.Boolean(), nullable=False),
        sa.Column("priority_level", sa.String(), nullable=False),
        sa.Column("notes", sa.JSON(), nullable=True),
        sa.UniqueConstraint("vaccine_id", "dose_number", name="uq_vaccination_schedules_dose"),
        sa.CheckConstraint(
            "recommended_age_days >= age_range_start_days",
            name="ck_vaccination_schedules_recommended_after_start",
        ),
        sa.CheckConstraint(
            "age_range_end_days IS NULL OR recommended_age_days <= age_range_end_days",
            name="ck_vaccination_schedules_recommended_before_end",
        ),
    )

    op.create_table(
        "vaccination_records",
        sa.Column("record_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("patient_id", sa.Integer(), sa.ForeignKey("patients.patient_id", ondelete="CASCADE"), nullable=False),
        sa.Column("vaccine_id", sa.Integer(), sa.ForeignKey("vaccines.vaccine_id"), nullable=False),
        sa.Column("dose_number", sa.Integer(), nullable=False),
        sa.Column("vaccination_date", sa.Date(), nullable=False),
        sa.Column("administered_by", sa.String(length=255), nullable=True),
        sa.Column("vaccination_center", sa.String(length=255), nullable=True),
        sa.Column("batch_number", sa.String(length=100), nullable=True),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("adverse_events", sa.Text(), nullable=True),
        sa.Column("next_dose_due_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("patient_id", "vaccine_id", "dose_number", name="uq_vaccination_records_dose"),
    )
    op.create_index("ix_vaccination_records_patient_id", "vaccination_records", ["patient_id"])

    op.create_table(
        "vaccination_reminders",
        sa.Column("reminder_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("patient_id", sa.Integer(), sa.ForeignKey("patients.patient_id", ondelete="CASCADE"), nullable=False),
        sa.Column("vaccine_id", sa.Integer(), sa.ForeignKey("vaccines.vaccine_id"), nullable=False),
        sa.Column("dose_number", sa.Integer(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("reminder_date", sa.Date(), nullable=False),
        sa.Column("reminder_type", sa.String(length=16), nullable=False),
        sa.Column("priority", sa.String(length=16), nullable=False),
        sa.Column("language", sa.String(length=8), nullable=False),
        sa.Column("message_templates", sa.JSON(), nullable=False),
        sa.Column("delivery_status", sa.String(length=16), nullable=False),
        sa.Column("sent", sa.Boolean(), nullable=False),
        sa.Column("sent_at", sa.DateTime(), nullable=True),
        sa.Column("response_received", sa.Boolean(), nullable=False),
        sa.Column("response_text", sa.Text(), nullable=True),
        sa.Column("rescheduled_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_vaccination_reminders_patient_id", "vaccination_reminders", ["patient_id"])
    op.create_index("ix_vaccination_reminders_reminder_date", "vaccination_reminders", ["reminder_date"])

    op.create_table(
        "vaccination_preferences",
        sa.Column("preference_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "patient_id",
            sa.Integer(),
            sa.ForeignKey("patients.patient_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("reminder_enabled", sa.Boolean(), nullable=False),
        sa.Column("reminder_advance_days", sa.Integer(), nullable=False),
        sa.Column("preferred_reminder_time", sa.String(length=8), nullable=False),
        sa.Column("language", sa.String(length=8), nullable=False),
        sa.Column("notification_channels", sa.JSON(), nullable=False),
        sa.Column("auto_schedule", sa.Boolean(), nullable=False),
        sa.Column("privacy_consent", sa.Boolean(), nullable=False),
        sa.Column("data_sharing_consent", sa.Boolean(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("patient_id", name="uq_vaccination_preferences_patient_id"),
    )


def downgrade() -> None:
    op.drop_table("vaccination_preferences")
    op.drop_index("ix_vaccination_reminders_reminder_date", table_name="vaccination_reminders")
    op.drop_index("ix_vaccination_reminders_patient_id", table_name="vaccination_reminders")
    op.drop_table("vaccination_reminders")
    op.drop_index("ix_vaccination_records_patient_id", table_name="vaccination_records")
    op.drop_table("vaccination_records")
    op.drop_table("vaccination_schedules")
    op.drop_table("vaccines")
    op.drop_index("ix_patients_date_of_birth", table_name="patients")
    op.drop_table("patients")
