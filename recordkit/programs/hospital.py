"""Patients, doctors and the appointments that link them."""
from datetime import datetime

from ..core.exceptions import InvalidInputError
from ..core.record import RecordId
from ..store import RecordStore
from .console import ProgramContext, make_table, print_info, print_success, run_menu

DATE_FORMAT = "%Y-%m-%d"


class Hospital:
    """
    Three independent stores saved side by side.

    Identities come from each store's sequence, so an id freed by a
    delete is never handed out again in the same session.
    """

    def __init__(self, patients: RecordStore, doctors: RecordStore, appointments: RecordStore):
        self.patients = patients
        self.doctors = doctors
        self.appointments = appointments

    def add_patient(self, name: str, age: int, gender: str) -> RecordId:
        if not name.strip():
            raise InvalidInputError("Patient name must not be empty")
        if age < 0:
            raise InvalidInputError(f"Age must not be negative, got {age}")
        return self.patients.insert({"name": name, "age": age, "gender": gender})

    def add_doctor(self, name: str, specialization: str) -> RecordId:
        if not name.strip():
            raise InvalidInputError("Doctor name must not be empty")
        return self.doctors.insert({"name": name, "specialization": specialization})

    def can_schedule(self) -> bool:
        return len(self.patients) > 0 and len(self.doctors) > 0

    def schedule(self, patient_id: int, doctor_id: int, date: str) -> RecordId:
        """
        Book an appointment between an existing patient and doctor.

        Raises:
            InvalidInputError: If there are no patients or doctors, an id is
                unknown, or date is not YYYY-MM-DD
        """
        if not self.can_schedule():
            raise InvalidInputError(
                "Cannot schedule appointment. Please add patients and doctors first.")
        if self.patients.find(patient_id) is None or self.doctors.find(doctor_id) is None:
            raise InvalidInputError("Invalid Patient or Doctor ID. Appointment not scheduled.")
        try:
            datetime.strptime(date, DATE_FORMAT)
        except ValueError:
            raise InvalidInputError(f"Invalid date {date!r}, expected YYYY-MM-DD")

        return self.appointments.insert(
            {"patient_id": patient_id, "doctor_id": doctor_id, "date": date})

    def save(self) -> None:
        for store in (self.patients, self.doctors, self.appointments):
            store.save()


def patients_table(hospital: Hospital):
    return make_table("All Patients", ["ID", "Name", "Age", "Gender"],
                      [[p["id"], p["name"], p["age"], p["gender"]]
                       for p in hospital.patients.list()])


def doctors_table(hospital: Hospital):
    return make_table("All Doctors", ["ID", "Name", "Specialization"],
                      [[d["id"], d["name"], d["specialization"]]
                       for d in hospital.doctors.list()])


def appointments_table(hospital: Hospital):
    return make_table("All Appointments", ["Appt. ID", "Patient ID", "Doctor ID", "Date"],
                      [[a["id"], a["patient_id"], a["doctor_id"], a["date"]]
                       for a in hospital.appointments.list()])


def run(ctx: ProgramContext) -> None:
    hospital = Hospital(ctx.open_store("patients"), ctx.open_store("doctors"),
                        ctx.open_store("appointments"))
    reader, console = ctx.reader, ctx.console

    counts = (len(hospital.patients), len(hospital.doctors), len(hospital.appointments))
    if any(counts):
        print_info(console, "Loaded data from files: %d Patients, %d Doctors, %d Appointments."
                   % counts)

    def add_patient():
        name = reader.read_line("Enter Name: ")
        age = reader.read_int("Enter Age: ")
        gender = reader.read_line("Enter Gender: ")
        record_id = hospital.add_patient(name, age, gender)
        print_success(console, f"Patient added successfully! (ID: {record_id.identity})")

    def add_doctor():
        name = reader.read_line("Enter Name: ")
        specialization = reader.read_line("Enter Specialization: ")
        record_id = hospital.add_doctor(name, specialization)
        print_success(console, f"Doctor added successfully! (ID: {record_id.identity})")

    def schedule():
        if not hospital.can_schedule():
            raise InvalidInputError(
                "Cannot schedule appointment. Please add patients and doctors first.")
        console.print(patients_table(hospital))
        console.print(doctors_table(hospital))
        patient_id = reader.read_int("Enter Patient ID: ")
        doctor_id = reader.read_int("Enter Doctor ID: ")
        date = reader.read_line("Enter Date (YYYY-MM-DD): ")
        record_id = hospital.schedule(patient_id, doctor_id, date)
        print_success(console, f"Appointment scheduled successfully! (ID: {record_id.identity})")

    def listing(store: RecordStore, empty_message: str, table):
        def show():
            if not len(store):
                print_info(console, empty_message)
                return
            console.print(table(hospital))
        return show

    run_menu(ctx, "Hospital Management System", [
        ("Add New Patient", add_patient),
        ("Add New Doctor", add_doctor),
        ("Schedule Appointment", schedule),
        ("Display All Patients",
         listing(hospital.patients, "No patients registered.", patients_table)),
        ("Display All Doctors",
         listing(hospital.doctors, "No doctors registered.", doctors_table)),
        ("Display All Appointments",
         listing(hospital.appointments, "No appointments scheduled.", appointments_table)),
    ], "Save and Exit", on_exit=hospital.save, farewell="All data saved. Exiting...")
