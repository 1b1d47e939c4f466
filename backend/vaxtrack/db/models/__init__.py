# backend/vaxtrack/db/models/__init__.py

from vaxtrack.db.models.patient import Patient
from vaxtrack.db.models.vaccine import Vaccine
from vaxtrack.db.models.schedule import ScheduleEntry
from vaxtrack.db.models.vaccination_record import VaccinationRecord
from vaxtrack.db.models.reminder import Reminder
from vaxtrack.db.models.preference import Preference
