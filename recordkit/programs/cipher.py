"""Caesar-cipher encryption and decryption of files."""
import logging
from pathlib import Path

from ..core.exceptions import InvalidInputError
from ..storage import StorageError
from .console import ProgramContext, print_info, print_success, run_menu

logger = logging.getLogger(__name__)

ENCRYPT = 1
DECRYPT = -1
MIN_KEY = 1
MAX_KEY = 25


def shift_byte(ch: int, shift: int) -> int:
    """
    Shift an ASCII letter by `shift` places, wrapping within its case.

    Any other byte is returned unchanged.
    """
    if 65 <= ch <= 90:
        base = 65
    elif 97 <= ch <= 122:
        base = 97
    else:
        return ch
    return (ch - base + shift % 26 + 26) % 26 + base


def caesar(data: bytes, shift: int) -> bytes:
    return bytes(shift_byte(ch, shift) for ch in data)


def check_key(key: int) -> None:
    if not (MIN_KEY <= key <= MAX_KEY):
        raise InvalidInputError(
            f"Invalid key {key}. Please use a number between {MIN_KEY} and {MAX_KEY}.")


def transform_file(input_path: str | Path, output_path: str | Path, key: int, mode: int) -> int:
    """
    Write the Caesar transform of input_path to output_path.

    Args:
        key: 1..25
        mode: ENCRYPT (shift forward) or DECRYPT (shift backward)

    Returns:
        Number of bytes written

    Raises:
        InvalidInputError: If key or mode is out of range
        StorageError: If either file cannot be opened, read or written
    """
    check_key(key)
    if mode not in (ENCRYPT, DECRYPT):
        raise InvalidInputError(f"Mode must be {ENCRYPT} or {DECRYPT}, got {mode}")

    try:
        data = Path(input_path).read_bytes()
    except OSError as e:
        raise StorageError(f"Error opening input file {input_path}: {e}")

    processed = caesar(data, key * mode)
    try:
        Path(output_path).write_bytes(processed)
    except OSError as e:
        raise StorageError(f"Error opening output file {output_path}: {e}")

    logger.debug("Caesar %+d: %s -> %s (%d bytes)", key * mode, input_path, output_path,
                 len(processed))
    return len(processed)


def run(ctx: ProgramContext) -> None:
    reader, console = ctx.reader, ctx.console

    def process(mode: int):
        operation = "Encrypt" if mode == ENCRYPT else "Decrypt"
        console.print(f"\n--- File {operation}ion ---")
        input_name = reader.read_line("Enter input file name: ").strip()
        output_name = reader.read_line("Enter output file name: ").strip()
        key = reader.read_int("Enter the key (a number from 1 to 25): ")
        transform_file(input_name, output_name, key, mode)
        print_success(console, f"File has been {operation.lower()}ed successfully!")
        print_info(console, f"Input: {input_name}")
        print_info(console, f"Output: {output_name}")

    run_menu(ctx, "File Encryptor/Decryptor", [
        ("Encrypt a File", lambda: process(ENCRYPT)),
        ("Decrypt a File", lambda: process(DECRYPT)),
    ], "Exit", farewell="Exiting program.")
