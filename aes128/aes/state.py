"""
AES128 - State Transformations
The four AES round operations and their inverses on a 4x4 byte state.

The state is a list of four rows, each a list of four byte values. Byte ``i``
of a flat 16-byte block lives at ``state[i % 4][i // 4]`` (column-major).
Every transform mutates the state in place and returns it.
"""

from .constants import BLOCK_SIZE, MIX_MATRIX, INV_MIX_MATRIX
from .galois import MUL_TABLES


def _check_state(state):
    if len(state) != 4 or any(len(row) != 4 for row in state):
        raise ValueError("state must be 4x4")


def bytes_to_state(data):
    # load a flat block column by column
    if len(data) != BLOCK_SIZE:
        raise ValueError("state must be loaded from exactly 16 bytes")
    return [[data[col * 4 + row] for col in range(4)] for row in range(4)]


def state_to_bytes(state):
    _check_state(state)
    result = bytearray(BLOCK_SIZE)
    for col in range(4):
        for row in range(4):
            result[col * 4 + row] = state[row][col]
    return bytes(result)


def _substitute(state, table):
    _check_state(state)
    for row in state:
        for j in range(4):
            value = row[j]
            row[j] = table[value >> 4][value & 0x0F]
    return state


def sub_bytes(state, sbox):
    """Replace every byte with ``sbox[high nibble][low nibble]``."""
    return _substitute(state, sbox)


def inv_sub_bytes(state, inv_sbox):
    """Undo :func:`sub_bytes` with the inverse S-box."""
    return _substitute(state, inv_sbox)


def shift_rows(state):
    # row i rotated left by i
    _check_state(state)
    for i in range(1, 4):
        row = state[i]
        row[:] = row[i:] + row[:i]
    return state


def inv_shift_rows(state):
    # row i rotated right by i
    _check_state(state)
    for i in range(1, 4):
        row = state[i]
        row[:] = row[-i:] + row[:-i]
    return state


def _mix(state, matrix):
    _check_state(state)

    for col in range(4):
        column = [state[row][col] for row in range(4)]
        for row in range(4):
            coefficients = matrix[row]
            state[row][col] = (
                MUL_TABLES[coefficients[0]][column[0]]
                ^ MUL_TABLES[coefficients[1]][column[1]]
                ^ MUL_TABLES[coefficients[2]][column[2]]
                ^ MUL_TABLES[coefficients[3]][column[3]]
            )
    return state


def mix_columns(state):
    """Multiply each column by the fixed {02,03,01,01} circulant matrix."""
    return _mix(state, MIX_MATRIX)


def inv_mix_columns(state):
    """Multiply each column by the inverse {0E,0B,0D,09} circulant matrix."""
    return _mix(state, INV_MIX_MATRIX)


def add_round_key(state, round_key):
    # element-wise XOR, its own inverse
    _check_state(state)
    _check_state(round_key)
    for i in range(4):
        state_row = state[i]
        key_row = round_key[i]
        for j in range(4):
            state_row[j] ^= key_row[j]
    return state
