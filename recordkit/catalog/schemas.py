"""
Built-in record schemas, one per console program.

Capacities and file names are fixed per schema; text widths include the
terminating zero byte.
"""
from ..core.record import Column, RecordDesc
from ..core.types import FieldType
from ..store import StoreSchema, IdentityPolicy

TOTAL_SEATS = 32
MAX_DIARY_TEXT = 1024
MAX_RECIPE_TEXT = 2048

SEATS = StoreSchema(
    name="seats",
    desc=RecordDesc([
        Column("seat_number", FieldType.INT),
        Column("is_booked", FieldType.BOOLEAN),
        Column("passenger_name", FieldType.STRING, 100),
    ]),
    capacity=TOTAL_SEATS,
    key_field="seat_number",
    identity=IdentityPolicy.POSITIONAL,
    filename="bus_reservation.dat",
)

CONTACTS = StoreSchema(
    name="contacts",
    desc=RecordDesc([
        Column("name", FieldType.STRING, 100),
        Column("phone", FieldType.STRING, 20),
        Column("email", FieldType.STRING, 100),
    ]),
    capacity=100,
    key_field="name",
    identity=IdentityPolicy.CALLER,
    ignore_case=True,
    filename="contacts.dat",
)

# Rates are not persisted; the converter seeds them at start.
CURRENCIES = StoreSchema(
    name="currencies",
    desc=RecordDesc([
        Column("code", FieldType.STRING, 4),
        Column("name", FieldType.STRING, 50),
        Column("rate_vs_usd", FieldType.DOUBLE),
    ]),
    capacity=16,
    key_field="code",
    identity=IdentityPolicy.CALLER,
    ignore_case=True,
)

PATIENTS = StoreSchema(
    name="patients",
    desc=RecordDesc([
        Column("id", FieldType.INT),
        Column("name", FieldType.STRING, 100),
        Column("age", FieldType.INT),
        Column("gender", FieldType.STRING, 10),
    ]),
    capacity=100,
    key_field="id",
    identity=IdentityPolicy.SEQUENCE,
    filename="patients.dat",
)

DOCTORS = StoreSchema(
    name="doctors",
    desc=RecordDesc([
        Column("id", FieldType.INT),
        Column("name", FieldType.STRING, 100),
        Column("specialization", FieldType.STRING, 100),
    ]),
    capacity=50,
    key_field="id",
    identity=IdentityPolicy.SEQUENCE,
    filename="doctors.dat",
)

APPOINTMENTS = StoreSchema(
    name="appointments",
    desc=RecordDesc([
        Column("id", FieldType.INT),
        Column("patient_id", FieldType.INT),
        Column("doctor_id", FieldType.INT),
        Column("date", FieldType.STRING, 20),
    ]),
    capacity=200,
    key_field="id",
    identity=IdentityPolicy.SEQUENCE,
    filename="appointments.dat",
)

BOOKS = StoreSchema(
    name="books",
    desc=RecordDesc([
        Column("id", FieldType.INT),
        Column("title", FieldType.STRING, 100),
        Column("author", FieldType.STRING, 100),
    ]),
    capacity=100,
    key_field="id",
    identity=IdentityPolicy.SEQUENCE,
    filename="library.dat",
)

DIARY = StoreSchema(
    name="diary",
    desc=RecordDesc([
        Column("timestamp", FieldType.LONG),
        Column("content", FieldType.STRING, MAX_DIARY_TEXT),
    ]),
    capacity=100,
    filename="diary.dat",
)

RECIPES = StoreSchema(
    name="recipes",
    desc=RecordDesc([
        Column("title", FieldType.STRING, 100),
        Column("ingredients", FieldType.STRING, MAX_RECIPE_TEXT),
        Column("instructions", FieldType.STRING, MAX_RECIPE_TEXT),
    ]),
    capacity=50,
    key_field="title",
    identity=IdentityPolicy.NONE,
    ignore_case=True,
    filename="recipes.dat",
)

STUDENTS = StoreSchema(
    name="students",
    desc=RecordDesc([
        Column("roll_no", FieldType.INT),
        Column("name", FieldType.STRING, 50),
        Column("mark1", FieldType.INT),
        Column("mark2", FieldType.INT),
        Column("mark3", FieldType.INT),
    ]),
    capacity=100,
    key_field="roll_no",
    identity=IdentityPolicy.CALLER,
    filename="students.dat",
)

BUILTIN_SCHEMAS = [
    SEATS, CONTACTS, CURRENCIES, PATIENTS, DOCTORS,
    APPOINTMENTS, BOOKS, DIARY, RECIPES, STUDENTS,
]
