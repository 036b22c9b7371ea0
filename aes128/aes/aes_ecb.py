#!/usr/bin/env python3
"""
AES128 - AES-ECB Implementation
Provides AES encryption/decryption in ECB mode with zero padding.
"""

import logging
from Crypto.Cipher import AES as CryptoAES
from .aes_utils import (
    as_chunk_size, iter_padded_blocks, pad_zeros, unpad_zeros, validate_block_size
)
from .constants import BLOCK_SIZE

# setup logging
logger = logging.getLogger("AES128")


def encrypt(cipher, data, chunk_size=BLOCK_SIZE, iv=None):
    """
    Encrypt data using AES in ECB mode.

    Args:
        cipher: Block cipher offering encrypt_block()
        data: Data to encrypt
        chunk_size: Message chunk size (ChunkSize, >= 16)
        iv: Not used in ECB, accepted for API consistency

    Returns:
        bytes: Ciphertext, a multiple of 16 bytes
    """
    chunk_size = as_chunk_size(chunk_size)

    result = bytearray()
    for block in iter_padded_blocks(data, chunk_size):
        # every block encrypted independently
        result.extend(cipher.encrypt_block(block))

    logger.debug(f"ECB encrypt: {len(data)} bytes -> {len(result)} bytes (chunk size {chunk_size})")
    return bytes(result)


def decrypt(cipher, ciphertext, chunk_size=BLOCK_SIZE, iv=None):
    """
    Decrypt data using AES in ECB mode.

    Trailing zero bytes are stripped, so a plaintext that ended in 0x00
    comes back shorter.

    Args:
        cipher: Block cipher offering decrypt_block()
        ciphertext: Data to decrypt
        chunk_size: Message chunk size, validated but not needed for decryption
        iv: Not used in ECB

    Returns:
        bytes: Decrypted data
    """
    as_chunk_size(chunk_size)
    validate_block_size(ciphertext)

    result = bytearray()
    for i in range(0, len(ciphertext), BLOCK_SIZE):
        result.extend(cipher.decrypt_block(bytes(ciphertext[i:i + BLOCK_SIZE])))

    logger.debug(f"ECB decrypt: {len(ciphertext)} bytes in {len(ciphertext) // BLOCK_SIZE} blocks")
    return unpad_zeros(result)


def encrypt_stdlib(data, key):
    """
    Encrypt data using PyCryptodome AES-ECB with the same zero padding.

    Args:
        data: Data to encrypt
        key: 16-byte master key

    Returns:
        bytes: Ciphertext
    """
    cipher = CryptoAES.new(key, CryptoAES.MODE_ECB)
    return cipher.encrypt(pad_zeros(data))


def decrypt_stdlib(ciphertext, key):
    """
    Decrypt data using PyCryptodome AES-ECB and strip zero padding.

    Args:
        ciphertext: Data to decrypt
        key: 16-byte master key

    Returns:
        bytes: Decrypted data
    """
    validate_block_size(ciphertext)
    cipher = CryptoAES.new(key, CryptoAES.MODE_ECB)
    return unpad_zeros(cipher.decrypt(ciphertext))
