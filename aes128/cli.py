import sys
import argparse
import logging

from aes128.core import (
    format_hex, load_cipher_config, load_run_config, read_hex_file, write_hex_file
)
from aes128.aes import aes_ecb, aes_cbc, aes_ofb, aes_ctr
from aes128.aes.aes_utils import ChunkSize, SegmentSize
from aes128.aes.custom_aes import CustomAES
from aes128.aes.exceptions import AESError

# setup logging
logger = logging.getLogger("AES128")

MODES = {
    "ecb": aes_ecb,
    "cbc": aes_cbc,
    "ofb": aes_ofb,
    "ctr": aes_ctr,
}

OPTION_KEYS = (
    "mode", "operation", "size", "input", "round_keys", "sbox",
    "inv_sbox", "iv", "counter_width", "out"
)

REQUIRED_KEYS = ("mode", "operation", "input", "round_keys", "sbox")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="aes128",
        description="AES-128 encryption with ECB, CBC, OFB and CTR modes over hex files"
    )
    parser.add_argument("-m", "--mode", choices=sorted(MODES) + ["block"],
                        help="Mode of operation, or 'block' for a single 16-byte block")
    parser.add_argument("-o", "--operation", choices=["encrypt", "decrypt"])
    parser.add_argument("-b", "--size", type=int,
                        help="Chunk size for ECB/CBC (>= 16) or XOR segment size for OFB/CTR (> 0)")
    parser.add_argument("-i", "--input", help="Hex file with the input bytes")
    parser.add_argument("-k", "--round-keys", dest="round_keys", help="Round key file (11 lines of 16 bytes)")
    parser.add_argument("-s", "--sbox", help="S-box file (16 lines of 16 bytes)")
    parser.add_argument("--inv-sbox", dest="inv_sbox", help="Inverse S-box file, computed when omitted")
    parser.add_argument("-v", "--iv", help="Hex file with the 16-byte IV / initial counter block")
    parser.add_argument("--counter-width", dest="counter_width", type=int, choices=[8, 16],
                        help="CTR counter width in bytes (default 8)")
    parser.add_argument("--out", help="Output file, hex result is printed when omitted")
    parser.add_argument("--config", help="JSON file with any of the options above")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_options(args):
    # JSON config first, command line flags win
    options = {}
    if args.config:
        options.update(load_run_config(args.config))

    for key in OPTION_KEYS:
        value = getattr(args, key)
        if value is not None:
            options[key] = value

    missing = [key for key in REQUIRED_KEYS if not options.get(key)]
    if missing:
        raise ValueError(f"Missing required options: {', '.join(missing)}")

    options["mode"] = str(options["mode"]).lower()
    if options["mode"] not in MODES and options["mode"] != "block":
        raise ValueError(f"Unsupported mode: {options['mode']}")
    if options["operation"] not in ("encrypt", "decrypt"):
        raise ValueError(f"Unsupported operation: {options['operation']}")
    return options


def run(options):
    """
    Execute one encrypt/decrypt run described by resolved options.

    Returns:
        bytes: Output buffer
    """
    config = load_cipher_config(options["sbox"], options["round_keys"], options.get("inv_sbox"))
    cipher = CustomAES(config)
    data = read_hex_file(options["input"])
    mode = options["mode"]
    encrypting = options["operation"] == "encrypt"

    if mode == "block":
        return cipher.encrypt_block(data) if encrypting else cipher.decrypt_block(data)

    iv = read_hex_file(options["iv"]) if options.get("iv") else None
    size = options.get("size", 16)
    module = MODES[mode]
    func = module.encrypt if encrypting else module.decrypt

    if mode in ("ecb", "cbc"):
        return func(cipher, data, ChunkSize(size), iv)
    if mode == "ctr":
        return func(cipher, data, SegmentSize(size), iv, options.get("counter_width", 8))
    return func(cipher, data, SegmentSize(size), iv)


def main(argv=None):
    # main entry point
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        options = resolve_options(args)
        result = run(options)

        if options.get("out"):
            write_hex_file(options["out"], result)
            logger.info(f"Wrote {len(result)} bytes to {options['out']}")
        else:
            print(format_hex(result))
    except (AESError, ValueError, OSError) as e:
        logger.error(f"AES run failed: {str(e)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
