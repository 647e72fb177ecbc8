"""Interactive console menu for the ledger."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from .blockchain import Blockchain, ChainFullError

_MENU = (
    "\n=== BLOCKCHAIN MENU ===\n"
    "1) Add a New Block\n"
    "2) Display the Blockchain\n"
    "3) Validate the Blockchain\n"
    "4) Save Blockchain to File\n"
    "5) Load Blockchain from File\n"
    "6) Exit\n"
    "Choose an option: "
)
_CHOICE = re.compile(r"\s*([+-]?\d+)")


def _read_line(stdin: TextIO) -> str:
    return stdin.readline().removesuffix("\n")


def _parse_choice(line: str) -> int | None:
    match = _CHOICE.match(line)
    return int(match.group(1)) if match else None


def run_menu(
    ledger: Blockchain, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> None:
    """Run the menu loop until the user exits or input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write(_MENU)
        line = stdin.readline()
        if not line:
            break
        choice = _parse_choice(line)

        if choice == 1:
            stdout.write("Enter block data: ")
            data = _read_line(stdin)
            try:
                ledger.add_block(data)
            except ChainFullError as error:
                sys.stderr.write(f"{error}\n")
            else:
                stdout.write("Block added.\n")
        elif choice == 2:
            ledger.display(stdout)
        elif choice == 3:
            if ledger.validate():
                stdout.write("Blockchain is valid!\n")
            else:
                stdout.write("Blockchain is invalid!\n")
        elif choice == 4:
            stdout.write("Enter output file name: ")
            filename = _read_line(stdin)
            try:
                ledger.save(filename)
            except OSError:
                sys.stderr.write(f"Error opening file for writing: {filename}\n")
            else:
                stdout.write(f"Blockchain saved to file: {filename}\n")
        elif choice == 5:
            stdout.write("Enter input file name: ")
            filename = _read_line(stdin)
            try:
                ledger.load(filename)
            except OSError:
                sys.stderr.write(f"Error opening file for reading: {filename}\n")
            else:
                stdout.write(f"Blockchain loaded from file: {filename}\n")
        elif choice == 6:
            break
        else:
            stdout.write("Invalid choice. Try again.\n")

    stdout.write("Exiting...\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive ledger menu."""
    parser = argparse.ArgumentParser(description="Interactive blockchain ledger.")
    parser.parse_args(argv)
    run_menu(Blockchain())
    return 0