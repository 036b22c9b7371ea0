import os
import secrets

from .constants import S_BOX, RCON, KEY_SIZE, NUM_ROUND_KEYS, BLOCK_SIZE
from .exceptions import InvalidParameterError


def format_key_size(size_bits):

    # convert key form bits to bytes
    return size_bits // 8


def generate_key(key_size=128):

    key_bytes = format_key_size(key_size)

    # only AES-128 is supported by the custom engine
    if key_bytes != KEY_SIZE:
        raise InvalidParameterError(f"Invalid key size: {key_size} bits. Must be 128 bits.")

    return os.urandom(key_bytes)


def get_iv(mode, custom=False):

    # generate a 16-byte IV; ECB ignores it
    if custom:
        return bytes(secrets.randbits(8) for _ in range(BLOCK_SIZE))
    return os.urandom(BLOCK_SIZE)


def expand_key(master_key):
    """
    Expand a 16-byte master key into the 11 AES-128 round keys (FIPS-197 5.2).

    The block engine only consumes round keys; this is the collaborator that
    produces them when the caller starts from a master key instead of a file.

    Args:
        master_key: 16-byte key

    Returns:
        list: 11 round keys of 16 bytes each
    """
    if len(master_key) != KEY_SIZE:
        raise InvalidParameterError("Key size must be 16 bytes (128 bits)")

    expanded_key = bytearray(NUM_ROUND_KEYS * BLOCK_SIZE)
    expanded_key[:KEY_SIZE] = master_key

    i = KEY_SIZE
    rcon_iteration = 1
    temp = bytearray(4)

    while i < len(expanded_key):
        # last word generated so far
        temp[:] = expanded_key[i - 4:i]

        if i % KEY_SIZE == 0:
            # RotWord, SubWord, Rcon
            temp[:] = temp[1:] + temp[:1]
            for j in range(4):
                temp[j] = S_BOX[temp[j]]
            temp[0] ^= RCON[rcon_iteration]
            rcon_iteration += 1

        for j in range(4):
            expanded_key[i] = expanded_key[i - KEY_SIZE] ^ temp[j]
            i += 1

    return [bytes(expanded_key[r * BLOCK_SIZE:(r + 1) * BLOCK_SIZE]) for r in range(NUM_ROUND_KEYS)]
