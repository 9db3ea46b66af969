import pytest

from ticklekit.vram import VRAM_MAX_ADDR, VRAM_MAX_BLOCKS, VramAllocator, VramBlock


def test_sequential_allocation():
    vram = VramAllocator()
    a = vram.alloc(0x40)
    b = vram.alloc(0x20)
    assert a.addr == 0
    assert b.addr == a.addr + a.size
    assert vram.blocks == [a, b]


def test_alignment():
    vram = VramAllocator()
    vram.alloc(0x10)
    block = vram.alloc(0x10, 0x100)
    assert block.addr == 0x100
    assert block.addr % 0x100 == 0


def test_exhaustion_raises():
    vram = VramAllocator()
    vram.alloc(0xFFFF)
    vram.alloc(0x1)
    assert vram.addr == VRAM_MAX_ADDR
    with pytest.raises(MemoryError):
        vram.alloc(1)


def test_block_table_full_raises_but_advances():
    vram = VramAllocator()
    for _ in range(VRAM_MAX_BLOCKS):
        vram.alloc(1)
    before = vram.addr
    with pytest.raises(MemoryError):
        vram.alloc(5)
    assert vram.addr == before + 5


def test_size_range_checked():
    with pytest.raises(ValueError):
        VramAllocator().alloc(0x10000)


def test_free_and_reset():
    vram = VramAllocator()
    block = vram.alloc(8)
    vram.free(block)
    assert vram.blocks == []
    assert vram.alloc(8).addr == block.addr + block.size
    with pytest.raises(ValueError):
        vram.free(VramBlock(0, 1))
    vram.reset()
    assert vram.alloc(4).addr == 0