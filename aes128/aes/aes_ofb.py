#!/usr/bin/env python3
"""
AES128 - AES-OFB Implementation
Provides AES encryption/decryption in OFB mode. Encryption and decryption
are the same operation.
"""

import logging
from Crypto.Cipher import AES as CryptoAES
from .aes_utils import as_segment_size, validate_iv
from .constants import BLOCK_SIZE

# setup logging
logger = logging.getLogger("AES128")


def encrypt(cipher, data, segment_size=BLOCK_SIZE, iv=None):
    """
    Encrypt data using AES in OFB mode.

    The keystream is produced 16 bytes at a time by re-encrypting the running
    state. Each XOR step consumes at most ``segment_size`` bytes and never
    crosses the end of the current keystream block.

    Args:
        cipher: Block cipher offering encrypt_block()
        data: Data to encrypt
        segment_size: XOR segment size (SegmentSize, > 0)
        iv: 16-byte initialization vector

    Returns:
        bytes: Encrypted data, same length as the input
    """
    validate_iv(iv)
    segment_size = as_segment_size(segment_size)

    result = bytearray(len(data))
    feedback = bytes(iv)
    keystream = b""
    ks_pos = BLOCK_SIZE  # force generation on the first step
    pos = 0
    blocks = 0

    while pos < len(data):
        if ks_pos == BLOCK_SIZE:
            # next keystream block is the encrypted feedback
            feedback = cipher.encrypt_block(feedback)
            keystream = feedback
            ks_pos = 0
            blocks += 1

        n = min(segment_size, len(data) - pos, BLOCK_SIZE - ks_pos)
        for i in range(n):
            result[pos + i] = data[pos + i] ^ keystream[ks_pos + i]
        ks_pos += n
        pos += n

    logger.debug(f"OFB: {len(data)} bytes, {blocks} keystream blocks (segment size {segment_size})")
    return bytes(result)


def decrypt(cipher, data, segment_size=BLOCK_SIZE, iv=None):
    """Decrypt data using AES in OFB mode (identical to encryption)."""
    return encrypt(cipher, data, segment_size, iv)


def encrypt_stdlib(data, key, iv):
    """Encrypt data using PyCryptodome AES-OFB."""
    validate_iv(iv)
    cipher = CryptoAES.new(key, CryptoAES.MODE_OFB, iv=iv)
    return cipher.encrypt(data)


def decrypt_stdlib(data, key, iv):
    """Decrypt data using PyCryptodome AES-OFB."""
    validate_iv(iv)
    cipher = CryptoAES.new(key, CryptoAES.MODE_OFB, iv=iv)
    return cipher.decrypt(data)
