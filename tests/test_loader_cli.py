import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from aes128 import cli
from aes128.aes.config import CipherConfig
from aes128.aes.constants import S_BOX, INV_S_BOX
from aes128.aes.exceptions import ConfigurationIncompleteError
from aes128.aes.key_utils import expand_key
from aes128.core.utils import (
    format_hex, load_cipher_config, parse_hex, read_hex_file,
    read_round_keys_file, read_sbox_file, write_hex_file
)


KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
PLAINTEXT = bytes.fromhex("00112233445566778899aabbccddeeff")
CIPHERTEXT = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")


def table_text(table):
    lines = []
    for r in range(16):
        lines.append(" ".join(f"{v:02x}" for v in table[r * 16:(r + 1) * 16]))
    return "\n".join(lines) + "\n"


class FileTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = self._tmp.name
        self.sbox_path = self.write("sbox.txt", table_text(S_BOX))
        self.inv_sbox_path = self.write("sbox_inv.txt", table_text(INV_S_BOX))
        self.keys_path = self.write(
            "keys.txt", "\n".join(format_hex(k) for k in expand_key(KEY)) + "\n"
        )

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, text):
        path = os.path.join(self.dir, name)
        with open(path, "w") as f:
            f.write(text)
        return path


class TestHexEncoding(unittest.TestCase):
    def test_parse_and_format(self):
        self.assertEqual(parse_hex("00 1f\nA0\tff"), b"\x00\x1f\xa0\xff")
        self.assertEqual(format_hex(b"\x00\x1f\xa0\xff"), "00 1F A0 FF")
        self.assertEqual(parse_hex(""), b"")

    def test_invalid_tokens(self):
        with self.assertRaises(ValueError):
            parse_hex("zz")
        with self.assertRaises(ValueError):
            parse_hex("100")


class TestLoaders(FileTestCase):
    def test_read_tables(self):
        rows = read_sbox_file(self.sbox_path)
        self.assertEqual(rows[0][0], 0x63)
        self.assertEqual(rows[15][15], 0x16)
        self.assertEqual(read_round_keys_file(self.keys_path), expand_key(KEY))

    def test_sbox_without_spaces(self):
        compact = "\n".join(
            "".join(f"{v:02X}" for v in S_BOX[r * 16:(r + 1) * 16]) for r in range(16)
        )
        path = self.write("compact.txt", compact)
        self.assertEqual(read_sbox_file(path), read_sbox_file(self.sbox_path))

    def test_load_config_with_and_without_inverse(self):
        computed = load_cipher_config(self.sbox_path, self.keys_path)
        supplied = load_cipher_config(self.sbox_path, self.keys_path, self.inv_sbox_path)
        self.assertIsInstance(computed, CipherConfig)
        self.assertEqual(computed.inv_sbox, supplied.inv_sbox)

    def test_short_files(self):
        keys = self.write("short_keys.txt", "\n".join(format_hex(k) for k in expand_key(KEY)[:10]))
        with self.assertRaises(ConfigurationIncompleteError):
            read_round_keys_file(keys)

        bad_row = self.write("bad_keys.txt", "00 01\n" * 11)
        with self.assertRaises(ConfigurationIncompleteError):
            read_round_keys_file(bad_row)

        sbox = self.write("short_sbox.txt", "\n".join(table_text(S_BOX).splitlines()[:15]))
        with self.assertRaises(ConfigurationIncompleteError):
            read_sbox_file(sbox)

    def test_hex_file_round_trip(self):
        path = os.path.join(self.dir, "data.txt")
        write_hex_file(path, CIPHERTEXT)
        self.assertEqual(read_hex_file(path), CIPHERTEXT)


class TestCli(FileTestCase):
    def run_cli(self, *args):
        out = io.StringIO()
        with redirect_stdout(out):
            status = cli.main(list(args))
        return status, out.getvalue().strip()

    def test_single_block(self):
        input_path = self.write("pt.txt", format_hex(PLAINTEXT))
        status, output = self.run_cli(
            "-m", "block", "-o", "encrypt", "-i", input_path,
            "-k", self.keys_path, "-s", self.sbox_path
        )
        self.assertEqual(status, 0)
        self.assertEqual(parse_hex(output), CIPHERTEXT)

    def test_cbc_round_trip_through_files(self):
        data = b"The quick brown fox jumps over the lazy dog"
        input_path = self.write("msg.txt", format_hex(data))
        iv_path = self.write("iv.txt", format_hex(bytes(range(16))))
        enc_path = os.path.join(self.dir, "enc.txt")
        dec_path = os.path.join(self.dir, "dec.txt")

        common = ["-m", "cbc", "-b", "32", "-v", iv_path, "-k", self.keys_path,
                  "-s", self.sbox_path, "--inv-sbox", self.inv_sbox_path]
        self.assertEqual(cli.main(["-o", "encrypt", "-i", input_path, "--out", enc_path] + common), 0)
        self.assertEqual(len(read_hex_file(enc_path)), 48)
        self.assertEqual(cli.main(["-o", "decrypt", "-i", enc_path, "--out", dec_path] + common), 0)
        self.assertEqual(read_hex_file(dec_path), data)

    def test_json_config_and_flag_override(self):
        data = b"counter mode text"
        input_path = self.write("msg.txt", format_hex(data))
        iv_path = self.write("iv.txt", format_hex(b"\xff" * 16))
        config_path = self.write("run.json", json.dumps({
            "mode": "ctr",
            "operation": "encrypt",
            "size": 3,
            "input": input_path,
            "round_keys": self.keys_path,
            "sbox": self.sbox_path,
            "iv": iv_path,
            "counter_width": 16,
        }))

        status, encrypted = self.run_cli("--config", config_path)
        self.assertEqual(status, 0)
        self.assertEqual(len(parse_hex(encrypted)), len(data))

        enc_path = self.write("enc.txt", encrypted)
        status, decrypted = self.run_cli("--config", config_path, "-o", "decrypt", "-i", enc_path)
        self.assertEqual(status, 0)
        self.assertEqual(parse_hex(decrypted), data)

    def test_errors_return_nonzero(self):
        input_path = self.write("msg.txt", format_hex(b"abc"))
        # missing IV for OFB
        status, _ = self.run_cli(
            "-m", "ofb", "-o", "encrypt", "-i", input_path,
            "-k", self.keys_path, "-s", self.sbox_path
        )
        self.assertEqual(status, 1)

        # chunk size below one block
        status, _ = self.run_cli(
            "-m", "ecb", "-o", "encrypt", "-b", "8", "-i", input_path,
            "-k", self.keys_path, "-s", self.sbox_path
        )
        self.assertEqual(status, 1)

        # missing required options
        status, _ = self.run_cli("-m", "ecb")
        self.assertEqual(status, 1)


if __name__ == "__main__":
    unittest.main()
