import os
import random
import unittest

from aes128.aes.config import CipherConfig
from aes128.aes.constants import S_BOX, INV_S_BOX
from aes128.aes.galois import galois_multiply, MUL_TABLES
from aes128.aes.key_utils import expand_key
from aes128.aes.state import (
    bytes_to_state, state_to_bytes,
    sub_bytes, inv_sub_bytes,
    shift_rows, inv_shift_rows,
    mix_columns, inv_mix_columns,
    add_round_key
)


def _rows(table):
    return [table[r * 16:(r + 1) * 16] for r in range(16)]


SBOX_ROWS = _rows(S_BOX)
INV_SBOX_ROWS = _rows(INV_S_BOX)


def random_state(rng):
    return [[rng.randrange(256) for _ in range(4)] for _ in range(4)]


def copy_state(state):
    return [row[:] for row in state]


class TestGaloisMultiply(unittest.TestCase):
    def test_fips197_products(self):
        self.assertEqual(galois_multiply(0x57, 0x83), 0xC1)
        self.assertEqual(galois_multiply(0x57, 0x13), 0xFE)

    def test_xtime_chain(self):
        expected = {0x02: 0xAE, 0x04: 0x47, 0x08: 0x8E, 0x10: 0x07}
        for b, product in expected.items():
            self.assertEqual(galois_multiply(0x57, b), product)

    def test_identity_zero_and_commutativity(self):
        rng = random.Random(1)
        for _ in range(200):
            a, b = rng.randrange(256), rng.randrange(256)
            self.assertEqual(galois_multiply(a, 1), a)
            self.assertEqual(galois_multiply(a, 0), 0)
            self.assertEqual(galois_multiply(a, b), galois_multiply(b, a))

    def test_tables_match_multiply(self):
        for coefficient, table in MUL_TABLES.items():
            self.assertEqual(table[0x57], galois_multiply(0x57, coefficient))
        self.assertEqual(sorted(MUL_TABLES), [0x01, 0x02, 0x03, 0x09, 0x0B, 0x0D, 0x0E])


class TestStateLayout(unittest.TestCase):
    def test_column_major_load(self):
        state = bytes_to_state(bytes(range(16)))
        self.assertEqual(state[0], [0, 4, 8, 12])
        self.assertEqual(state[3], [3, 7, 11, 15])
        self.assertEqual(state_to_bytes(state), bytes(range(16)))

    def test_rejects_non_square_state(self):
        bad_states = [
            [[0] * 4] * 3,
            [[0] * 4, [0] * 4, [0] * 3, [0] * 4],
        ]
        for bad in bad_states:
            with self.assertRaises(ValueError):
                shift_rows([row[:] for row in bad])
            with self.assertRaises(ValueError):
                mix_columns([row[:] for row in bad])
            with self.assertRaises(ValueError):
                sub_bytes([row[:] for row in bad], SBOX_ROWS)
            with self.assertRaises(ValueError):
                add_round_key([row[:] for row in bad], [[0] * 4] * 4)


class TestRoundOperations(unittest.TestCase):
    # FIPS-197 Appendix B, round 1
    START = bytes.fromhex("193de3bea0f4e22b9ac68d2ae9f84808")
    AFTER_SUB = bytes.fromhex("d42711aee0bf98f1b8b45de51e415230")
    AFTER_SHIFT = bytes.fromhex("d4bf5d30e0b452aeb84111f11e2798e5")
    AFTER_MIX = bytes.fromhex("046681e5e0cb199a48f8d37a2806264c")

    def test_round_one_sequence(self):
        state = bytes_to_state(self.START)
        self.assertEqual(state_to_bytes(sub_bytes(state, SBOX_ROWS)), self.AFTER_SUB)
        self.assertEqual(state_to_bytes(shift_rows(state)), self.AFTER_SHIFT)
        self.assertEqual(state_to_bytes(mix_columns(state)), self.AFTER_MIX)

    def test_mix_columns_known_columns(self):
        state = bytes_to_state(bytes.fromhex("db135345f20a225c01010101c6c6c6c6"))
        mix_columns(state)
        self.assertEqual(state_to_bytes(state), bytes.fromhex("8e4da1bc9fdc589d01010101c6c6c6c6"))

    def test_shift_rows_rotations(self):
        state = [[r * 4 + c for c in range(4)] for r in range(4)]
        shift_rows(state)
        self.assertEqual(state[0], [0, 1, 2, 3])
        self.assertEqual(state[1], [5, 6, 7, 4])
        self.assertEqual(state[2], [10, 11, 8, 9])
        self.assertEqual(state[3], [15, 12, 13, 14])

    def test_add_round_key_with_schedule_matrix(self):
        config = CipherConfig(S_BOX, expand_key(bytes(range(16))))
        state = bytes_to_state(bytes.fromhex("00112233445566778899aabbccddeeff"))
        add_round_key(state, config.round_key_matrix(0))
        self.assertEqual(state_to_bytes(state), bytes.fromhex("00102030405060708090a0b0c0d0e0f0"))


class TestInverses(unittest.TestCase):
    def test_every_transform_is_undone(self):
        rng = random.Random(2024)
        for _ in range(100):
            original = random_state(rng)
            key = random_state(rng)

            state = copy_state(original)
            self.assertEqual(inv_sub_bytes(sub_bytes(state, SBOX_ROWS), INV_SBOX_ROWS), original)
            self.assertEqual(inv_shift_rows(shift_rows(state)), original)
            self.assertEqual(inv_mix_columns(mix_columns(state)), original)
            self.assertEqual(add_round_key(add_round_key(state, key), key), original)

    def test_sbox_tables_are_inverse(self):
        for x in range(256):
            self.assertEqual(INV_S_BOX[S_BOX[x]], x)

    def test_random_block_survives_full_layout(self):
        data = os.urandom(16)
        self.assertEqual(state_to_bytes(bytes_to_state(data)), data)


if __name__ == "__main__":
    unittest.main()
