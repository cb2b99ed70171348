"""Bus seat reservation over a fixed set of 32 seats."""
from ..catalog.schemas import TOTAL_SEATS
from ..core.exceptions import InvalidInputError, NotFoundError
from ..core.record import Record
from ..store import RecordStore
from .console import ProgramContext, make_table, print_info, print_success, run_menu

EMPTY_PASSENGER = "N/A"
SEATS_PER_ROW = 4


class BusReservations:
    """Seat bookings; every seat always exists, booking only flips its state."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.fill_seats()

    def fill_seats(self) -> int:
        """Add free seats until the bus has all of them. Returns how many were added."""
        added = 0
        while len(self.store) < TOTAL_SEATS:
            self.store.insert({"is_booked": False, "passenger_name": EMPTY_PASSENGER})
            added += 1
        return added

    def get_seat(self, seat_number: int) -> Record:
        if not (1 <= seat_number <= TOTAL_SEATS):
            raise InvalidInputError(f"Invalid seat number {seat_number}")
        return self.store.get(seat_number)

    def check_available(self, seat_number: int) -> None:
        seat = self.get_seat(seat_number)
        if seat["is_booked"]:
            raise InvalidInputError(
                f"Seat {seat_number} is already booked by {seat['passenger_name']}")

    def book(self, seat_number: int, passenger_name: str) -> None:
        self.check_available(seat_number)
        if not passenger_name.strip():
            raise InvalidInputError("Passenger name must not be empty")
        self.store.update(seat_number, {"is_booked": True, "passenger_name": passenger_name})

    def cancel(self, seat_number: int) -> str:
        """Free a booked seat and return the passenger it was booked for."""
        seat = self.get_seat(seat_number)
        if not seat["is_booked"]:
            raise NotFoundError(f"Seat {seat_number} is not booked")
        self.store.update(seat_number, {"is_booked": False, "passenger_name": EMPTY_PASSENGER})
        return seat["passenger_name"]

    def booked_seats(self) -> list[Record]:
        return [seat for seat in self.store.list() if seat["is_booked"]]

    def seat_map(self) -> str:
        """Rows of four cells: [XX] for booked seats, [NN] for free ones."""
        cells = []
        lines = []
        for seat in self.store.list():
            cells.append("[XX]" if seat["is_booked"] else f"[{seat['seat_number']:02d}]")
            if len(cells) == SEATS_PER_ROW:
                lines.append(" ".join(cells))
                cells = []
        if cells:
            lines.append(" ".join(cells))
        return "\n".join(lines)


def run(ctx: ProgramContext) -> None:
    store = ctx.open_store("seats")
    if len(store):
        print_info(ctx.console, "Loaded previous booking data.")
    bus = BusReservations(store)
    console = ctx.console

    def show_map():
        console.print("\n--- Bus Seat Map ---")
        console.print("[XX] = Booked, [##] = Available", markup=False)
        console.print(bus.seat_map(), markup=False, highlight=False)

    def book():
        show_map()
        seat_number = ctx.reader.read_int("Enter the seat number you want to book: ")
        bus.check_available(seat_number)
        name = ctx.reader.read_line(f"Enter passenger name for seat {seat_number}: ")
        bus.book(seat_number, name)
        print_success(console, f"Seat {seat_number} booked successfully for {name}!")

    def cancel():
        seat_number = ctx.reader.read_int("Enter the seat number to cancel booking: ")
        name = bus.cancel(seat_number)
        print_success(console, f"Booking for seat {seat_number} by {name} has been canceled.")

    def show_booked():
        seats = bus.booked_seats()
        if not seats:
            print_info(console, "No seats are currently booked.")
            return
        console.print(make_table("Booked Seats", ["Seat Number", "Passenger Name"],
                                 [[s["seat_number"], s["passenger_name"]] for s in seats]))

    run_menu(ctx, "Bus Reservation System", [
        ("Display Seat Map", show_map),
        ("Book a Seat", book),
        ("Cancel a Booking", cancel),
        ("Display Booked Seats List", show_booked),
    ], "Save and Exit", on_exit=store.save, farewell="Booking data saved. Have a safe journey!")
