import logging

# configure logging
logger = logging.getLogger("AES128")
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# import components
from .utils import (
    parse_hex,
    format_hex,
    read_hex_file,
    write_hex_file,
    read_sbox_file,
    read_round_keys_file,
    load_cipher_config,
    load_run_config
)

__all__ = [
    'parse_hex',
    'format_hex',
    'read_hex_file',
    'write_hex_file',
    'read_sbox_file',
    'read_round_keys_file',
    'load_cipher_config',
    'load_run_config',
]
