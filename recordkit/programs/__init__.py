from . import bus, cipher, clock, contacts, currency, diary, hospital, library, recipes, students
from .console import LineReader, ProgramContext, run_menu

PROGRAMS = {
    "bus": (bus.run, "Bus seat reservation"),
    "contacts": (contacts.run, "Contact book"),
    "currency": (currency.run, "Currency converter"),
    "clock": (clock.run, "Digital clock and countdown timer"),
    "cipher": (cipher.run, "Caesar-cipher file encryptor"),
    "hospital": (hospital.run, "Hospital patients, doctors and appointments"),
    "library": (library.run, "Library catalog"),
    "diary": (diary.run, "Personal diary"),
    "recipes": (recipes.run, "Recipe book"),
    "students": (students.run, "Student records"),
}

__all__ = ["PROGRAMS", "LineReader", "ProgramContext", "run_menu"]
