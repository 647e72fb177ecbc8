import pytest

from ledgerchain.block import Block, checksum_hash


def test_checksum_of_empty_text_is_zero():
    assert checksum_hash("") == "0"


def test_checksum_of_single_ascii_character():
    assert checksum_hash("A") == "41"


def test_checksum_wraps_for_non_ascii_bytes():
    assert checksum_hash("\u00e9") == "ffffff6c"


@pytest.mark.parametrize("left, right", [("ab", "ba"), ("hello", "olleh"), ("xyz1", "1zyx")])
def test_checksum_ignores_character_order(left, right):
    assert checksum_hash(left) == checksum_hash(right)


def test_checksum_is_lower_case_hex():
    result = checksum_hash("The quick brown fox")
    assert result == result.lower()
    assert int(result, 16) >= 0


def test_default_block_fields():
    block = Block()
    assert block.index == 0
    assert block.timestamp == ""
    assert block.data == ""
    assert block.previous_hash == "0"
    assert block.current_hash == "0"


def test_create_computes_hash():
    block = Block.create(3, "Mon Jan  1 00:00:00 2024", "payment", "abc")
    assert block.current_hash == block.compute_hash()
    assert block.is_consistent()


def test_compute_hash_covers_all_fields_in_order():
    block = Block(7, "ts", "data", "prev")
    assert block.compute_hash() == checksum_hash("7tsdataprev")


def test_changed_data_breaks_consistency():
    block = Block.create(1, "ts", "original", "0")
    block.data = "changed"
    assert not block.is_consistent()


def test_anagram_data_keeps_the_same_hash():
    first = Block.create(1, "ts", "listen", "0")
    second = Block.create(1, "ts", "silent", "0")
    assert first.current_hash == second.current_hash


def test_default_block_is_not_consistent():
    assert not Block().is_consistent()