#!/usr/bin/env python3
"""
AES128 - AES-CTR Implementation
Provides AES encryption/decryption in CTR mode.

The 16-byte IV doubles as the initial counter block. With
``CounterWidth.NONCE_COUNTER`` the leading 8 bytes are a fixed nonce and the
trailing 8 bytes a big-endian counter; with ``CounterWidth.FULL_BLOCK`` the
whole block is the counter. Either way the counter wraps to zero on overflow.
"""

import logging
from Crypto.Cipher import AES as CryptoAES
from .aes_utils import (
    CounterWidth, as_counter_width, as_segment_size, increment_counter, validate_iv
)
from .constants import BLOCK_SIZE
from .exceptions import InvalidParameterError

# setup logging
logger = logging.getLogger("AES128")


def counter_block(iv):
    """
    Return the initial counter block for an IV given as bytes or as an integer.

    An integer is encoded as a 16-byte big-endian block, which lets callers
    start the full-width counter from a plain number.
    """
    if isinstance(iv, int):
        if iv < 0 or iv >= 1 << (8 * BLOCK_SIZE):
            raise InvalidParameterError(f"Initial counter must fit in {BLOCK_SIZE} bytes")
        return iv.to_bytes(BLOCK_SIZE, "big")

    validate_iv(iv)
    return bytes(iv)


def encrypt(cipher, data, segment_size=BLOCK_SIZE, iv=None, counter_width=CounterWidth.NONCE_COUNTER):
    """
    Encrypt data using AES in CTR mode.

    Args:
        cipher: Block cipher offering encrypt_block()
        data: Data to encrypt
        segment_size: XOR segment size (SegmentSize, > 0)
        iv: 16-byte nonce||counter block, or a non-negative integer
        counter_width: CounterWidth, how many trailing bytes count

    Returns:
        bytes: Encrypted data, same length as the input
    """
    block = bytearray(counter_block(iv))
    segment_size = as_segment_size(segment_size)
    counter_width = as_counter_width(counter_width)

    result = bytearray(len(data))
    keystream = b""
    ks_pos = BLOCK_SIZE  # force generation on the first step
    pos = 0
    blocks = 0

    while pos < len(data):
        if ks_pos == BLOCK_SIZE:
            keystream = cipher.encrypt_block(bytes(block))
            ks_pos = 0
            blocks += 1
            increment_counter(block, counter_width)

        n = min(segment_size, len(data) - pos, BLOCK_SIZE - ks_pos)
        for i in range(n):
            result[pos + i] = data[pos + i] ^ keystream[ks_pos + i]
        ks_pos += n
        pos += n

    logger.debug(
        f"CTR: {len(data)} bytes, {blocks} keystream blocks "
        f"(segment size {segment_size}, counter width {int(counter_width)})"
    )
    return bytes(result)


def decrypt(cipher, data, segment_size=BLOCK_SIZE, iv=None, counter_width=CounterWidth.NONCE_COUNTER):
    # CTR decryption is identical to encryption
    return encrypt(cipher, data, segment_size, iv, counter_width)


def encrypt_stdlib(data, key, iv, counter_width=CounterWidth.NONCE_COUNTER):
    """
    Encrypt data using PyCryptodome AES-CTR with the same counter layout.

    PyCryptodome refuses to wrap the counter and raises OverflowError where the
    custom implementation wraps to zero.
    """
    block = counter_block(iv)
    counter_width = as_counter_width(counter_width)

    nonce_length = BLOCK_SIZE - counter_width
    cipher = CryptoAES.new(
        key, CryptoAES.MODE_CTR,
        nonce=block[:nonce_length],
        initial_value=block[nonce_length:]
    )
    return cipher.encrypt(data)


def decrypt_stdlib(data, key, iv, counter_width=CounterWidth.NONCE_COUNTER):
    # same keystream as encryption
    return encrypt_stdlib(data, key, iv, counter_width)
