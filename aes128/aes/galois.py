from .constants import MIX_MATRIX, INV_MIX_MATRIX


def galois_multiply(a, b):
    # multiply two bytes in GF(2^8) modulo x^8 + x^4 + x^3 + x + 1
    a &= 0xFF
    b &= 0xFF
    product = 0

    for _ in range(8):
        if b & 1:
            product ^= a

        # xtime(a)
        high_bit = a & 0x80
        a = (a << 1) & 0xFF
        if high_bit:
            a ^= 0x1B
        b >>= 1

    return product


def _build_table(coefficient):
    return tuple(galois_multiply(x, coefficient) for x in range(256))


# one lookup table per coefficient used by MixColumns and its inverse
MUL_TABLES = {
    coefficient: _build_table(coefficient)
    for row in MIX_MATRIX + INV_MIX_MATRIX
    for coefficient in row
}
