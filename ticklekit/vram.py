"""A bump allocator for video memory blocks."""

from __future__ import annotations

from dataclasses import dataclass

VRAM_MAX_ADDR = 0x10000
VRAM_MAX_BLOCKS = 256


@dataclass
class VramBlock:
    addr: int
    size: int


class VramAllocator:
    """Hands out blocks in increasing address order; space returns only on reset."""

    def __init__(self) -> None:
        self.addr = 0
        self.blocks: list[VramBlock] = []

    def reset(self) -> None:
        self.addr = 0
        self.blocks = []

    def alloc(self, size: int, alignment: int = 0) -> VramBlock:
        """Allocate ``size`` units at the next address aligned to ``alignment``."""
        if not 0 <= size <= 0xFFFF:
            raise ValueError(f"block size out of range: {size}")
        addr = self.addr
        if alignment > 0:
            addr = (addr + alignment - 1) & ~(alignment - 1)
        if addr >= VRAM_MAX_ADDR:
            raise MemoryError("video memory exhausted")
        full = len(self.blocks) >= VRAM_MAX_BLOCKS
        # the address advances even when no block record is left
        self.addr = addr + size
        if full:
            raise MemoryError("no free video memory block records")
        block = VramBlock(addr, size)
        self.blocks.append(block)
        return block

    def free(self, block: VramBlock) -> None:
        """Forget ``block``; its address range stays in use until reset."""
        try:
            self.blocks.remove(block)
        except ValueError:
            raise ValueError("block was not allocated here") from None