"""Allocation size rounding matching the allocator's size classes."""

from __future__ import annotations

JEMALLOC_MIN_IN_PLACE_EXPANDABLE = 4096


def align_to_jesize(size: int) -> int:
    """Round ``size`` up to the size class the allocator would hand out."""
    if size <= 64:
        return 64
    if size <= 512:
        return (size + 63) & ~63
    if size <= 3840:
        return (size + 255) & ~255
    if size <= 4072 * 1024:
        return (size + 4095) & ~4095
    return (size + 4194303) & ~4194303