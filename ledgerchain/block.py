"""Ledger blocks and the checksum that links them."""

from __future__ import annotations

from dataclasses import dataclass

_WORD = 2**32


def checksum_hash(text: str) -> str:
    """Return the ledger checksum of *text* as lower-case hex.

    Each byte of the UTF-8 encoding is taken as a signed char and added
    into an unsigned 32-bit total, which wraps around on overflow.
    """
    total = 0
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        total = (total + signed) % _WORD
    return format(total, "x")


@dataclass
class Block:
    """One entry of the ledger."""

    index: int = 0
    timestamp: str = ""
    data: str = ""
    previous_hash: str = "0"
    current_hash: str = "0"

    def compute_hash(self) -> str:
        """Checksum over index, timestamp, data and previous hash."""
        return checksum_hash(
            f"{self.index}{self.timestamp}{self.data}{self.previous_hash}"
        )

    @classmethod
    def create(
        cls, index: int, timestamp: str, data: str, previous_hash: str
    ) -> "Block":
        """Build a block whose current hash is computed from its contents."""
        block = cls(index, timestamp, data, previous_hash)
        block.current_hash = block.compute_hash()
        return block

    def is_consistent(self) -> bool:
        """True when the stored hash matches the block's contents."""
        return self.current_hash == self.compute_hash()