"""Digital clock and countdown timer."""
import threading
from datetime import datetime
from typing import Callable, Iterable, Iterator, Optional

from rich.align import Align
from rich.panel import Panel
from rich import box

from ..config import settings
from ..core.exceptions import InvalidInputError
from .console import ProgramContext, print_info, run_menu


def clock_frame(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def clock_frames(now: Callable[[], datetime] = datetime.now) -> Iterator[str]:
    """Endless frames, one per tick, each showing the time at that tick."""
    while True:
        yield clock_frame(now())


def countdown_seconds(minutes: int, seconds: int) -> int:
    if minutes < 0 or seconds < 0:
        raise InvalidInputError("Invalid time entered.")
    return minutes * 60 + seconds


def countdown_frames(total_seconds: int) -> Iterator[str]:
    """MM:SS frames from total_seconds down to 00:00 inclusive."""
    if total_seconds < 0:
        raise InvalidInputError("Invalid time entered.")
    for remaining in range(total_seconds, -1, -1):
        yield f"{remaining // 60:02d}:{remaining % 60:02d}"


def run_periodic(frames: Iterable[str], emit: Callable[[str], None], interval: float,
                 stop: threading.Event) -> int:
    """
    Emit one frame per tick until the frames run out or stop is set.

    The first frame is emitted immediately; later frames follow after
    waiting interval seconds each. Setting stop ends the wait at once.

    Returns:
        Number of frames emitted
    """
    emitted = 0
    for frame in frames:
        if emitted and stop.wait(interval):
            break
        if stop.is_set():
            break
        emit(frame)
        emitted += 1
    return emitted


class Ticker(threading.Thread):
    """Runs run_periodic on a daemon thread; stop() cancels it."""

    def __init__(self, frames: Iterable[str], emit: Callable[[str], None],
                 interval: Optional[float] = None):
        super().__init__(daemon=True)
        self.frames = frames
        self.emit = emit
        self.interval = settings.TICK_INTERVAL if interval is None else interval
        self.emitted = 0
        self._stop_event = threading.Event()

    def run(self) -> None:
        self.emitted = run_periodic(self.frames, self.emit, self.interval, self._stop_event)

    def stop(self) -> None:
        self._stop_event.set()

    def stopped(self) -> bool:
        return self._stop_event.is_set()


def _play(ticker: Ticker) -> bool:
    """Run a ticker until it finishes or Ctrl+C. Returns True when it finished."""
    ticker.start()
    try:
        while ticker.is_alive():
            ticker.join(0.1)
    except KeyboardInterrupt:
        ticker.stop()
        ticker.join()
        return False
    return True


def run(ctx: ProgramContext) -> None:
    reader, console = ctx.reader, ctx.console

    def render(title: str):
        def emit(frame: str):
            console.clear()
            console.print(Panel(Align.center(f"[bold]{frame}[/bold]"), title=title,
                                box=box.DOUBLE, width=30))
            console.print("[dim](Press Ctrl+C to stop and return to menu)[/dim]")
        return emit

    def show_clock():
        _play(Ticker(clock_frames(), render("Current Time")))

    def start_timer():
        minutes = reader.read_int("Enter minutes: ")
        seconds = reader.read_int("Enter seconds: ")
        total = countdown_seconds(minutes, seconds)
        print_info(console, f"Timer starting for {minutes:02d}:{seconds:02d}. Press Ctrl+C to cancel.")
        if _play(Ticker(countdown_frames(total), render("Time Remaining"))):
            console.print("\n[bold red]!!! TIME'S UP !!![/bold red]")
            console.bell()

    run_menu(ctx, "Digital Clock & Timer", [
        ("Display Digital Clock", show_clock),
        ("Start Countdown Timer", start_timer),
    ], "Exit", farewell="Exiting program.")
