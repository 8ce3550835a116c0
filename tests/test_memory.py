import pytest

from axiom.memory import (
    BlockAllocator,
    DefaultAllocator,
    align,
    is_aligned,
)


@pytest.mark.parametrize("value", [0, 1, 7, 13, 100, 4095])
@pytest.mark.parametrize("alignment", [1, 2, 8, 16, 256])
def test_align_rounds_up_to_multiple(value, alignment):
    result = align(value, alignment)
    assert result % alignment == 0
    assert value <= result < value + alignment
    assert is_aligned(result, alignment)


def test_align_zero_alignment_keeps_value():
    assert align(13, 0) == 13


def test_align_keeps_aligned_value():
    assert align(64, 16) == 64


@pytest.mark.parametrize("alignment", [2, 8, 16])
def test_is_aligned_detects_offset(alignment):
    assert not is_aligned(align(5, alignment) + 1, alignment)


def test_default_allocator_round_trip():
    allocator = DefaultAllocator()
    address = allocator.malloc(8)
    allocator.write(address, b"abcdefgh")
    assert allocator.read(address, 8) == b"abcdefgh"
    assert allocator.read(address + 2, 3) == b"cde"


def test_default_allocator_distinct_addresses():
    allocator = DefaultAllocator()
    first = allocator.malloc(10)
    second = allocator.malloc(10)
    assert second >= first + 10


def test_default_allocator_honours_alignment():
    allocator = DefaultAllocator()
    allocator.malloc(3)
    address = allocator.malloc(4, 256)
    assert is_aligned(address, 256)


def test_malloc_zeroed():
    allocator = DefaultAllocator()
    address = allocator.malloc_zeroed(12)
    assert allocator.read(address, 12) == bytes(12)


def test_default_realloc_keeps_contents():
    allocator = DefaultAllocator()
    address = allocator.malloc(4)
    allocator.write(address, b"wxyz")
    moved = allocator.realloc(address, 16)
    assert allocator.read(moved, 4) == b"wxyz"
    with pytest.raises(ValueError):
        allocator.read(address, 4)


def test_default_realloc_none_allocates():
    allocator = DefaultAllocator()
    address = allocator.realloc(None, 6)
    allocator.write(address, b"qwerty")
    assert allocator.read(address, 6) == b"qwerty"


def test_default_free_and_errors():
    allocator = DefaultAllocator()
    address = allocator.malloc(4)
    allocator.free(address)
    with pytest.raises(ValueError):
        allocator.read(address, 4)
    with pytest.raises(ValueError):
        allocator.free(address)


def test_block_allocator_starts_with_one_block():
    assert BlockAllocator(1024).number_of_blocks == 1


def test_block_allocator_non_overlapping():
    allocator = BlockAllocator(1024)
    first = allocator.malloc(32)
    second = allocator.malloc(32)
    assert second >= first + 32 or first >= second + 32
    allocator.write(first, b"A" * 32)
    allocator.write(second, b"B" * 32)
    assert allocator.read(first, 32) == b"A" * 32
    assert allocator.read(second, 32) == b"B" * 32


def test_block_allocator_alignment_rounds_size():
    allocator = BlockAllocator(1024)
    first = allocator.malloc(3, 8)
    second = allocator.malloc(3, 8)
    assert second - first == align(3, 8)


def test_block_allocator_check_memory():
    allocator = BlockAllocator(1024)
    address = allocator.malloc(16)
    assert allocator.check_memory(address)
    assert not allocator.check_memory(None)
    allocator.free(address)
    assert not allocator.check_memory(address)


def test_block_allocator_reuses_freed_fragment():
    allocator = BlockAllocator(1024)
    first = allocator.malloc(16)
    allocator.malloc(16)
    allocator.write(first, b"x" * 16)
    allocator.free(first)
    again = allocator.malloc(16)
    assert again == first
    assert allocator.read(again, 16) == bytes(16)


def test_block_allocator_grows_new_block():
    allocator = BlockAllocator(64)
    first = allocator.malloc(64)
    second = allocator.malloc(1)
    assert allocator.number_of_blocks == 2
    assert not first <= second < first + 64


def test_block_allocator_rejects_bad_sizes():
    allocator = BlockAllocator(64)
    with pytest.raises(ValueError):
        allocator.malloc(65)
    with pytest.raises(ValueError):
        allocator.malloc(0)


def test_block_allocator_realloc_copies():
    allocator = BlockAllocator(1024)
    address = allocator.malloc(4)
    allocator.write(address, b"data")
    moved = allocator.realloc(address, 8)
    assert allocator.read(moved, 4) == b"data"
    assert not allocator.check_memory(address)
    assert allocator.check_memory(moved)


def test_block_allocator_realloc_none():
    assert BlockAllocator(1024).realloc(None, 8) is None


def test_block_allocator_free_unknown_raises():
    allocator = BlockAllocator(1024)
    address = allocator.malloc(8)
    with pytest.raises(ValueError):
        allocator.free(address + 1)


def test_block_allocator_default_block_size():
    allocator = BlockAllocator()
    allocator.malloc(8_388_608)
    assert allocator.number_of_blocks == 1
    with pytest.raises(ValueError):
        allocator.malloc(8_388_609)