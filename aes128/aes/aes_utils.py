from enum import IntEnum

from .constants import BLOCK_SIZE
from .exceptions import (
    InvalidIVLengthError, InvalidParameterError, MisalignedCiphertextError,
    InternalConsistencyError
)


class ChunkSize(int):
    """Message chunk size for ECB/CBC, at least one AES block."""

    def __new__(cls, value):
        if isinstance(value, SegmentSize):
            raise TypeError("SegmentSize cannot be used as a chunk size")
        if int(value) < BLOCK_SIZE:
            raise InvalidParameterError(f"Chunk size must be >= {BLOCK_SIZE}, got {value}")
        return super().__new__(cls, value)


class SegmentSize(int):
    """XOR segment size for OFB/CTR, any positive number of bytes."""

    def __new__(cls, value):
        if isinstance(value, ChunkSize):
            raise TypeError("ChunkSize cannot be used as a segment size")
        if int(value) <= 0:
            raise InvalidParameterError(f"Segment size must be > 0, got {value}")
        return super().__new__(cls, value)


class CounterWidth(IntEnum):
    # number of trailing IV bytes that form the CTR counter
    NONCE_COUNTER = 8
    FULL_BLOCK = 16


def as_chunk_size(value):
    if isinstance(value, ChunkSize):
        return value
    return ChunkSize(value)


def as_segment_size(value):
    if isinstance(value, SegmentSize):
        return value
    return SegmentSize(value)


def as_counter_width(value):
    try:
        return CounterWidth(value)
    except ValueError as e:
        raise InvalidParameterError(f"Counter width must be 8 or 16 bytes, got {value}") from e


# zero padding up to a multiple of block_size
def pad_zeros(data, block_size=BLOCK_SIZE):

    padding_length = (block_size - (len(data) % block_size)) % block_size
    return bytes(data) + bytes(padding_length)


# strip every trailing zero byte, legitimate ones included
def unpad_zeros(data):

    return bytes(data).rstrip(b"\x00")


def iter_padded_blocks(data, chunk_size):
    """
    Walk a message chunk by chunk and yield 16-byte AES blocks.

    Inside each chunk AES still runs on 16-byte blocks. Only the very last
    partial block of the whole message is zero padded.

    Raises:
        InternalConsistencyError: a partial block appears in a non-final chunk
    """
    total_length = len(data)

    for chunk_start in range(0, total_length, chunk_size):
        chunk_length = min(chunk_size, total_length - chunk_start)
        is_last_chunk = chunk_start + chunk_length == total_length

        for offset in range(0, chunk_length, BLOCK_SIZE):
            start = chunk_start + offset
            remaining = chunk_length - offset

            if remaining >= BLOCK_SIZE:
                yield bytes(data[start:start + BLOCK_SIZE])
            elif is_last_chunk:
                yield pad_zeros(data[start:start + remaining])
            else:
                raise InternalConsistencyError(
                    f"Unexpected partial AES block at offset {start} in non-final chunk"
                )


def xor_bytes(a, b):

    if len(a) != len(b):
        raise ValueError("Byte strings must have same length")

    return bytes(x ^ y for x, y in zip(a, b))


def increment_counter(counter_block, width=CounterWidth.NONCE_COUNTER):

    # big-endian +1 confined to the trailing `width` bytes, wraps to zero
    end = len(counter_block)
    for i in range(end - 1, end - 1 - width, -1):
        value = (counter_block[i] + 1) & 0xFF
        counter_block[i] = value
        if value != 0:
            break
    return counter_block


def validate_iv(iv):

    if iv is None or len(iv) != BLOCK_SIZE:
        length = None if iv is None else len(iv)
        raise InvalidIVLengthError(f"IV must be exactly 16 bytes, got {length}")


def validate_block_size(data, block_size=BLOCK_SIZE):

    if len(data) % block_size != 0:
        raise MisalignedCiphertextError(f"Data length must be multiple of {block_size} bytes")
