from .constants import BLOCK_SIZE, NUM_ROUNDS
from .exceptions import InvalidBlockSizeError
from .state import (
    bytes_to_state, state_to_bytes,
    sub_bytes, inv_sub_bytes,
    shift_rows, inv_shift_rows,
    mix_columns, inv_mix_columns,
    add_round_key
)


class CustomAES:
    """
    AES-128 block engine driven by an externally supplied configuration.

    Args:
        config: CipherConfig holding the S-boxes and the 11 round keys
    """

    block_size = BLOCK_SIZE

    def __init__(self, config):
        self.config = config
        self.rounds = NUM_ROUNDS

    def encrypt_block(self, plaintext):

        if len(plaintext) != BLOCK_SIZE:
            raise InvalidBlockSizeError(f"Plaintext block must be 16 bytes, got {len(plaintext)}")

        config = self.config
        sbox = config.sbox

        # convert plaintext to state matrix
        state = bytes_to_state(plaintext)

        # initial round key addition
        add_round_key(state, config.round_key_matrix(0))

        # main rounds
        for round_num in range(1, self.rounds):
            sub_bytes(state, sbox)
            shift_rows(state)
            mix_columns(state)
            add_round_key(state, config.round_key_matrix(round_num))

        # final round, no MixColumns
        sub_bytes(state, sbox)
        shift_rows(state)
        add_round_key(state, config.round_key_matrix(self.rounds))

        return state_to_bytes(state)

    def decrypt_block(self, ciphertext):

        if len(ciphertext) != BLOCK_SIZE:
            raise InvalidBlockSizeError(f"Ciphertext block must be 16 bytes, got {len(ciphertext)}")

        config = self.config
        inv_sbox = config.inv_sbox

        state = bytes_to_state(ciphertext)

        # start from the last round key
        add_round_key(state, config.round_key_matrix(self.rounds))

        # main rounds in reverse
        for round_num in range(self.rounds - 1, 0, -1):
            inv_shift_rows(state)
            inv_sub_bytes(state, inv_sbox)
            add_round_key(state, config.round_key_matrix(round_num))
            inv_mix_columns(state)

        # final round
        inv_shift_rows(state)
        inv_sub_bytes(state, inv_sbox)
        add_round_key(state, config.round_key_matrix(0))

        return state_to_bytes(state)
