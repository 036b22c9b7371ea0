#!/usr/bin/env python3
"""
AES128 - Table and Data Loading
Parses S-box, round-key and hex data files into the raw values the cipher
consumes. The cipher itself never touches the filesystem.
"""

import json
import logging
from pathlib import Path

from aes128.aes.config import CipherConfig
from aes128.aes.constants import BLOCK_SIZE, NUM_ROUND_KEYS
from aes128.aes.exceptions import ConfigurationIncompleteError

# setup logging
logger = logging.getLogger("AES128")


def parse_hex(text):
    """Parse whitespace-separated hex byte tokens into bytes."""
    tokens = text.split()
    try:
        values = [int(token, 16) for token in tokens]
    except ValueError as e:
        raise ValueError(f"Invalid hex token: {e}") from e

    for token, value in zip(tokens, values):
        if value > 0xFF:
            raise ValueError(f"Hex token out of byte range: {token}")
    return bytes(values)


def format_hex(data):
    """Format bytes as upper-case hex tokens separated by single spaces."""
    return " ".join(f"{b:02X}" for b in data)


def read_hex_file(path):
    return parse_hex(Path(path).read_text(encoding="utf-8"))


def write_hex_file(path, data):
    Path(path).write_text(format_hex(data) + "\n", encoding="utf-8")


def read_sbox_file(path):
    """
    Read a 16x16 S-box table.

    Each of the first 16 lines holds 32 hex digits once all whitespace is
    removed, i.e. one row of 16 bytes.

    Returns:
        list: 16 rows of 16 byte values

    Raises:
        ConfigurationIncompleteError: if a row is missing or malformed
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if len(lines) < 16:
        raise ConfigurationIncompleteError(f"S-box file {path} has {len(lines)} lines, expected 16")

    rows = []
    for i in range(16):
        digits = "".join(lines[i].split())
        if len(digits) != 32:
            raise ConfigurationIncompleteError(f"Invalid S-box line at row {i}: {lines[i]}")
        try:
            rows.append([int(digits[j * 2:j * 2 + 2], 16) for j in range(16)])
        except ValueError as e:
            raise ConfigurationIncompleteError(f"Invalid S-box line at row {i}: {lines[i]}") from e

    logger.info(f"Loaded S-box table from {path}")
    return rows


def read_round_keys_file(path, num_rounds=NUM_ROUND_KEYS, bytes_per_round=BLOCK_SIZE):
    """
    Read pre-expanded round keys, one round per line.

    Returns:
        list: ``num_rounds`` round keys as bytes

    Raises:
        ConfigurationIncompleteError: too few lines or a line of the wrong length
    """
    lines = [line for line in Path(path).read_text(encoding="utf-8").splitlines() if line.strip()]
    if len(lines) < num_rounds:
        raise ConfigurationIncompleteError(
            f"Expected at least {num_rounds} lines but found {len(lines)}"
        )

    round_keys = []
    for round_num in range(num_rounds):
        try:
            key = parse_hex(lines[round_num])
        except ValueError as e:
            raise ConfigurationIncompleteError(f"Line {round_num}: {e}") from e
        if len(key) != bytes_per_round:
            raise ConfigurationIncompleteError(
                f"Line {round_num} has {len(key)} bytes, expected {bytes_per_round}"
            )
        round_keys.append(key)

    logger.info(f"Loaded {num_rounds} round keys from {path}")
    return round_keys


def load_cipher_config(sbox_path, round_keys_path, inv_sbox_path=None):
    # the inverse table is computed when no file is given
    sbox = read_sbox_file(sbox_path)
    inv_sbox = read_sbox_file(inv_sbox_path) if inv_sbox_path else None
    round_keys = read_round_keys_file(round_keys_path)
    return CipherConfig(sbox, round_keys, inv_sbox=inv_sbox)


def load_run_config(path):
    # JSON file with the same keys as the CLI options
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid configuration file {path}: {e}") from e

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file {path} must hold a JSON object")
    return config
