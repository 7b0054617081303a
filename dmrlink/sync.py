"""Insertion of DMR sync patterns into a frame."""

from .defines import (
    BS_SOURCED_AUDIO_SYNC,
    BS_SOURCED_DATA_SYNC,
    MS_SOURCED_AUDIO_SYNC,
    MS_SOURCED_DATA_SYNC,
    SYNC_MASK,
)

_SYNC_OFFSET = 13


def _apply(data: bytearray, pattern: bytes) -> bytearray:
    end = _SYNC_OFFSET + len(SYNC_MASK)
    if len(data) < end:
        raise ValueError(f"frame must be at least {end} bytes long, got {len(data)}")
    for offset, (mask, sync) in enumerate(zip(SYNC_MASK, pattern), start=_SYNC_OFFSET):
        data[offset] = (data[offset] & ~mask & 0xFF) | sync
    return data


def add_dmr_data_sync(data: bytearray, duplex: bool) -> bytearray:
    """Write the data sync pattern into the frame in place and return it."""
    return _apply(data, BS_SOURCED_DATA_SYNC if duplex else MS_SOURCED_DATA_SYNC)


def add_dmr_audio_sync(data: bytearray, duplex: bool) -> bytearray:
    """Write the audio sync pattern into the frame in place and return it."""
    return _apply(data, BS_SOURCED_AUDIO_SYNC if duplex else MS_SOURCED_AUDIO_SYNC)