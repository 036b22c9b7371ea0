"""
AES128 - Cipher Configuration
Bundles the S-box, the inverse S-box and the 11 round keys that one cipher
instance works with. The value is immutable once built.
"""

import logging

from .constants import BLOCK_SIZE, NUM_ROUND_KEYS, S_BOX
from .exceptions import ConfigurationIncompleteError

# setup logging
logger = logging.getLogger("AES128")


def _normalize_table(table, name):
    # accept a flat 256-entry table or a 16x16 one, return 16 row tuples
    try:
        entries = list(table)
        if len(entries) == 16:
            if any(len(row) != 16 for row in entries):
                raise ConfigurationIncompleteError(f"{name} rows must hold 16 entries each")
            flat = [v for row in entries for v in row]
        else:
            flat = entries
    except TypeError as e:
        raise ConfigurationIncompleteError(f"{name} is malformed: {e}") from e

    if len(flat) != 256:
        raise ConfigurationIncompleteError(f"{name} must have 256 entries or 16x16 rows, got {len(flat)}")
    if any(not isinstance(v, int) or v < 0 or v > 0xFF for v in flat):
        raise ConfigurationIncompleteError(f"{name} entries must be byte values")

    return tuple(tuple(flat[r * 16:(r + 1) * 16]) for r in range(16))


def _lookup(table, value):
    return table[value >> 4][value & 0x0F]


def compute_inverse_sbox(sbox):
    """
    Compute the inverse of an S-box.

    Args:
        sbox: S-box as a flat 256-entry table or 16x16 rows

    Returns:
        tuple: 16 rows of 16 byte values

    Raises:
        ConfigurationIncompleteError: if the S-box is not a bijection
    """
    rows = _normalize_table(sbox, "S-box")
    inverse = [None] * 256

    for row in range(16):
        for col in range(16):
            value = rows[row][col]
            if inverse[value] is not None:
                raise ConfigurationIncompleteError(f"S-box is not a bijection: 0x{value:02X} appears twice")
            inverse[value] = (row << 4) | col

    return tuple(tuple(inverse[r * 16:(r + 1) * 16]) for r in range(16))


def _normalize_round_keys(round_keys):
    try:
        material = list(round_keys)
    except TypeError as e:
        raise ConfigurationIncompleteError(f"round keys are malformed: {e}") from e

    # flat buffer of bytes
    if material and isinstance(material[0], int):
        if len(material) < NUM_ROUND_KEYS * BLOCK_SIZE:
            raise ConfigurationIncompleteError(
                f"Expected at least {NUM_ROUND_KEYS * BLOCK_SIZE} bytes of round keys, got {len(material)}"
            )
        rows = [material[r * BLOCK_SIZE:(r + 1) * BLOCK_SIZE] for r in range(NUM_ROUND_KEYS)]
    else:
        if len(material) < NUM_ROUND_KEYS:
            raise ConfigurationIncompleteError(
                f"Expected at least {NUM_ROUND_KEYS} round keys, got {len(material)}"
            )
        rows = [list(row) for row in material[:NUM_ROUND_KEYS]]

    for r, row in enumerate(rows):
        if len(row) != BLOCK_SIZE:
            raise ConfigurationIncompleteError(f"Round key {r} has {len(row)} bytes, expected {BLOCK_SIZE}")
        if any(not isinstance(v, int) or v < 0 or v > 0xFF for v in row):
            raise ConfigurationIncompleteError(f"Round key {r} contains non-byte values")

    return tuple(bytes(row) for row in rows)


def _round_key_matrix(flat):
    # same column-major layout as the state
    return tuple(tuple(flat[col * 4 + row] for col in range(4)) for row in range(4))


class CipherConfig:
    """
    Immutable S-box / round-key configuration for one AES-128 cipher.

    Args:
        sbox: forward S-box, flat 256 entries or 16x16 rows
        round_keys: at least 176 bytes, or at least 11 rows of 16 bytes
        inv_sbox: inverse S-box; computed from ``sbox`` when omitted
    """

    __slots__ = ("sbox", "inv_sbox", "round_keys", "_matrices")

    def __init__(self, sbox, round_keys, inv_sbox=None):
        sbox = _normalize_table(sbox, "S-box")
        if inv_sbox is None:
            inv_sbox = compute_inverse_sbox(sbox)
        else:
            inv_sbox = _normalize_table(inv_sbox, "Inverse S-box")

        # both tables must undo each other
        for x in range(256):
            if _lookup(inv_sbox, _lookup(sbox, x)) != x:
                raise ConfigurationIncompleteError(
                    f"Inverse S-box does not invert S-box at 0x{x:02X}"
                )

        keys = _normalize_round_keys(round_keys)

        object.__setattr__(self, "sbox", sbox)
        object.__setattr__(self, "inv_sbox", inv_sbox)
        object.__setattr__(self, "round_keys", keys)
        object.__setattr__(self, "_matrices", tuple(_round_key_matrix(k) for k in keys))

    def __setattr__(self, name, value):
        raise AttributeError("CipherConfig is immutable")

    def round_key_matrix(self, round_num):
        """Return round key ``round_num`` as a 4x4 column-major matrix."""
        return self._matrices[round_num]

    @classmethod
    def canonical(cls, key):
        # standard S-box plus the FIPS-197 schedule of a master key
        from .key_utils import expand_key

        logger.debug("Building canonical AES-128 configuration from master key")
        return cls(S_BOX, expand_key(key))

    def __repr__(self):
        return f"CipherConfig(rounds={len(self.round_keys)})"
