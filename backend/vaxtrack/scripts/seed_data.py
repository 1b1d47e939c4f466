"""Module: seed_data."""

import argparse
import random
from datetime import date, timedelta

from faker import Faker

from vaxtrack.core.errors import VaccinationError
from vaxtrack.core.vocab import Language
from vaxtrack.db.init_db import init_db
from vaxtrack.db.models.patient import Patient
from vaxtrack.db.session import SessionLocal
from vaxtrack.services.catalog import get_schedule_entries, seed_catalog
from vaxtrack.services.records import record_vaccination

fake = Faker("en_IN")

SEED_LANGUAGES = [Language.ENGLISH.value, Language.HINDI.value, Language.TELUGU.value]


def generate_in_mobile() -> str:
    # Indian mobile format with country code: +91 and 10 digits starting 6-9.
    return "+91" + random.choice("6789") + "".join(random.choice("0123456789") for _ in range(9))


def seed_patients(session, n: int) -> list[Patient]:
    today = date.today()
    patients = []
    for _ in range(n):
        patients.append(
            Patient(
                name=fake.name(),
                date_of_birth=today - timedelta(days=random.randint(0, 6 * 365)),
                phone=generate_in_mobile(),
                language=random.choice(SEED_LANGUAGES),
            )
        )
    session.add_all(patients)
    session.commit()
    return patients


def seed_history(session, patients: list[Patient]) -> int:
    # Record most doses whose recommended date has passed, leaving gaps so some show as due/overdue.
    today = date.today()
    entries = get_schedule_entries(session)
    recorded = 0
    for patient in patients:
        for entry in entries:
            given_on = patient.date_of_birth + timedelta(days=entry.recommended_age_days + random.randint(0, 10))
            if given_on > today or random.random() < 0.2:
                continue
            try:
                record_vaccination(
                    session,
                    patient_id=patient.patient_id,
                    vaccine_id=entry.vaccine_id,
                    dose_number=entry.dose_number,
                    vaccination_date=given_on,
                    administered_by=fake.name(),
                    vaccination_center=f"{fake.city()} PHC",
                    batch_number=fake.bothify("??-####").upper(),
                )
                recorded += 1
            except VaccinationError as exc:
                print(f"  skipped {entry.vaccine.code} dose {entry.dose_number} for patient {patient.patient_id}: {exc}")
    return recorded


if __name__ == "__main__":
    # Seed pipeline: python -m vaxtrack.scripts.seed_data [--demo-patients N]
    parser = argparse.ArgumentParser(description="Seed the vaccination catalog and optional demo patients")
    parser.add_argument("--demo-patients", type=int, default=0)
    args = parser.parse_args()

    init_db(seed_reference_data=False)
    session = SessionLocal()
    try:
        print("Seeding vaccine catalog...")
        vaccine_n, schedule_n = seed_catalog(session)
        session.commit()

        patient_n = record_n = 0
        if args.demo_patients:
            print(f"Seeding patients ({args.demo_patients})...")
            patients = seed_patients(session, args.demo_patients)
            patient_n = len(patients)
            print("Seeding vaccination history...")
            record_n = seed_history(session, patients)

        print(f"Done. vaccines={vaccine_n}, schedules={schedule_n}, patients={patient_n}, records={record_n}")
    finally:
        session.close()
