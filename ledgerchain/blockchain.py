"""A bounded chain of blocks with validation and file storage."""

from __future__ import annotations

import re
import sys
import time
from typing import Callable, Iterator, TextIO

from .block import Block

MAX_BLOCKS = 100
GENESIS_DATA = "Genesis Block"
_LINE_LIMIT = 1023
_SEPARATOR = "-------------------------"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ChainFullError(Exception):
    """Raised when a block is added to a chain that holds MAX_BLOCKS."""


def current_time() -> str:
    """Local time in ctime form, without a trailing newline."""
    return time.ctime()


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Blockchain:
    """A ledger of at most MAX_BLOCKS blocks, starting with a genesis block."""

    def __init__(self, clock: Callable[[], str] | None = None) -> None:
        self._clock = clock if clock is not None else current_time
        self._blocks: list[Block] = [
            Block.create(0, self._clock(), GENESIS_DATA, "0")
        ]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __getitem__(self, position):
        return self._blocks[position]

    def add_block(self, data: str) -> Block:
        """Append a block holding *data*, linked to the last block."""
        if len(self._blocks) >= MAX_BLOCKS:
            raise ChainFullError("Blockchain is full. Cannot add more blocks.")
        previous_hash = self._blocks[-1].current_hash if self._blocks else "0"
        block = Block.create(len(self._blocks), self._clock(), data, previous_hash)
        self._blocks.append(block)
        return block

    def validate(self) -> bool:
        """Check every link and every stored hash after the first block."""
        return all(
            block.previous_hash == previous.current_hash and block.is_consistent()
            for previous, block in zip(self._blocks, self._blocks[1:])
        )

    def format_chain(self) -> str:
        """Human-readable listing of every block."""
        parts = []
        for position, block in enumerate(self._blocks):
            parts.append(
                f"Block {position}:\n"
                f"  Index: {block.index}\n"
                f"  Timestamp: {block.timestamp}\n"
                f"  Data: {block.data}\n"
                f"  PreviousHash: {block.previous_hash}\n"
                f"  CurrentHash: {block.current_hash}\n"
                f"{_SEPARATOR}\n"
            )
        return "".join(parts)

    def display(self, stream: TextIO | None = None) -> None:
        """Write the listing to *stream*, standard output by default."""
        (stream if stream is not None else sys.stdout).write(self.format_chain())

    def save(self, filename) -> None:
        """Write the chain as index|timestamp|data|prevHash|curHash lines."""
        with open(filename, "w", encoding="utf-8", newline="") as handle:
            for block in self._blocks:
                handle.write(
                    f"{block.index}|{block.timestamp}|{block.data}|"
                    f"{block.previous_hash}|{block.current_hash}\n"
                )

    def load(self, filename) -> None:
        """Replace the chain with the blocks stored in *filename*.

        Lines with fewer than five fields are skipped; at most MAX_BLOCKS
        blocks are read. The chain is left untouched if the file cannot
        be opened.
        """
        with open(filename, encoding="utf-8", newline="") as handle:
            text = handle.read()
        blocks: list[Block] = []
        for line in text.split("\n"):
            fields = line[:_LINE_LIMIT].split("|")
            if len(fields) < 5:
                continue
            index, timestamp, *middle, previous_hash, current_hash = fields
            blocks.append(
                Block(
                    _atoi(index),
                    timestamp,
                    "|".join(middle),
                    previous_hash,
                    current_hash,
                )
            )
            if len(blocks) >= MAX_BLOCKS:
                break
        self._blocks = blocks