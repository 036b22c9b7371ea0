import logging
from Crypto.Cipher import AES as CryptoAES
from .aes_utils import (
    as_chunk_size, iter_padded_blocks, pad_zeros, unpad_zeros,
    validate_block_size, validate_iv, xor_bytes
)
from .constants import BLOCK_SIZE

# setup logging
logger = logging.getLogger("AES128")


def encrypt(cipher, data, chunk_size=BLOCK_SIZE, iv=None):

    # check everything before the first block
    validate_iv(iv)
    chunk_size = as_chunk_size(chunk_size)

    result = bytearray()
    prev_block = bytes(iv)

    for block in iter_padded_blocks(data, chunk_size):
        # XOR with previous ciphertext block, then encrypt
        encrypted_block = cipher.encrypt_block(xor_bytes(block, prev_block))
        result.extend(encrypted_block)

        # update previous block
        prev_block = encrypted_block

    logger.debug(f"CBC encrypt: {len(data)} bytes -> {len(result)} bytes (chunk size {chunk_size})")
    return bytes(result)


def decrypt(cipher, ciphertext, chunk_size=BLOCK_SIZE, iv=None):

    validate_iv(iv)
    as_chunk_size(chunk_size)
    validate_block_size(ciphertext)

    result = bytearray()
    prev_block = bytes(iv)

    for i in range(0, len(ciphertext), BLOCK_SIZE):
        block = bytes(ciphertext[i:i + BLOCK_SIZE])

        # decrypt, then XOR with previous ciphertext block
        decrypted_block = cipher.decrypt_block(block)
        result.extend(xor_bytes(decrypted_block, prev_block))

        prev_block = block

    logger.debug(f"CBC decrypt: {len(ciphertext)} bytes in {len(ciphertext) // BLOCK_SIZE} blocks")

    # remove padding
    return unpad_zeros(result)


def encrypt_stdlib(data, key, iv):

    validate_iv(iv)
    cipher = CryptoAES.new(key, CryptoAES.MODE_CBC, iv)
    return cipher.encrypt(pad_zeros(data))


def decrypt_stdlib(ciphertext, key, iv):

    validate_iv(iv)
    validate_block_size(ciphertext)
    cipher = CryptoAES.new(key, CryptoAES.MODE_CBC, iv)
    return unpad_zeros(cipher.decrypt(ciphertext))
