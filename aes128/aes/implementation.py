import logging

from .base import AESImplementationBase
from .config import CipherConfig
from .custom_aes import CustomAES
from .key_utils import get_iv
from . import aes_ecb, aes_cbc, aes_ofb, aes_ctr

# setup logging
logger = logging.getLogger("AES128")

# dictionary to track implementations
AES_IMPLEMENTATIONS = {}

SUPPORTED_MODES = ("ECB", "CBC", "OFB", "CTR")


def register_aes_variant(name):

    def decorator(impl_class):
        AES_IMPLEMENTATIONS[name] = impl_class
        return impl_class
    return decorator


@register_aes_variant("aes")
class AESImplementation(AESImplementationBase):
    # one object per (mode, size, iv) combination, custom or PyCryptodome

    def __init__(self, key_size="128", mode="CBC", **kwargs):

        super().__init__(key_size, mode, **kwargs)

        if self.mode not in SUPPORTED_MODES:
            raise ValueError(f"Unsupported AES mode: {self.mode}")

        if self.is_custom:
            self.description = f"Custom AES-{key_size} in {self.mode} mode"
        else:
            self.description = f"PyCryptodome AES-{key_size} in {self.mode} mode"

    def _cipher(self, key):
        # key is either a ready CipherConfig or a 16-byte master key
        if isinstance(key, CipherConfig):
            return CustomAES(key)
        return CustomAES(CipherConfig.canonical(key))

    def _raw_key(self, key):
        if isinstance(key, CipherConfig):
            raise ValueError("PyCryptodome backend needs the raw 16-byte key, not a CipherConfig")
        return bytes(key)

    def _ensure_iv(self):
        if self.mode != "ECB" and self.iv is None:
            self.iv = get_iv(self.mode, self.is_custom)
            logger.info(f"Generated random IV for AES-{self.mode}")
        return self.iv

    def encrypt(self, data, key):

        iv = self._ensure_iv()

        # select appropriate mode implementation
        if self.is_custom:
            cipher = self._cipher(key)
            if self.mode == "ECB":
                return aes_ecb.encrypt(cipher, data, self.size)
            elif self.mode == "CBC":
                return aes_cbc.encrypt(cipher, data, self.size, iv)
            elif self.mode == "OFB":
                return aes_ofb.encrypt(cipher, data, self.size, iv)
            else:
                return aes_ctr.encrypt(cipher, data, self.size, iv, self.counter_width)

        raw_key = self._raw_key(key)
        if self.mode == "ECB":
            return aes_ecb.encrypt_stdlib(data, raw_key)
        elif self.mode == "CBC":
            return aes_cbc.encrypt_stdlib(data, raw_key, iv)
        elif self.mode == "OFB":
            return aes_ofb.encrypt_stdlib(data, raw_key, iv)
        else:
            return aes_ctr.encrypt_stdlib(data, raw_key, iv, self.counter_width)

    def decrypt(self, ciphertext, key):

        iv = self.iv

        if self.is_custom:
            cipher = self._cipher(key)
            if self.mode == "ECB":
                return aes_ecb.decrypt(cipher, ciphertext, self.size)
            elif self.mode == "CBC":
                return aes_cbc.decrypt(cipher, ciphertext, self.size, iv)
            elif self.mode == "OFB":
                return aes_ofb.decrypt(cipher, ciphertext, self.size, iv)
            else:
                return aes_ctr.decrypt(cipher, ciphertext, self.size, iv, self.counter_width)

        raw_key = self._raw_key(key)
        if self.mode == "ECB":
            return aes_ecb.decrypt_stdlib(ciphertext, raw_key)
        elif self.mode == "CBC":
            return aes_cbc.decrypt_stdlib(ciphertext, raw_key, iv)
        elif self.mode == "OFB":
            return aes_ofb.decrypt_stdlib(ciphertext, raw_key, iv)
        else:
            return aes_ctr.decrypt_stdlib(ciphertext, raw_key, iv, self.counter_width)


def create_custom_aes_implementation(mode, **kwargs):

    return AESImplementation(key_size="128", mode=mode, is_custom=True, **kwargs)


def create_stdlib_aes_implementation(mode, **kwargs):

    return AESImplementation(key_size="128", mode=mode, is_custom=False, **kwargs)


def get_implementation(name, **kwargs):
    # build an implementation by its registered name
    factory = AES_IMPLEMENTATIONS.get(name)
    if factory is None:
        raise ValueError(f"Unknown AES implementation: {name}")
    return factory(**kwargs)


def list_implementations():
    return list(AES_IMPLEMENTATIONS.keys())


def register_all_aes_variants():

    for mode in SUPPORTED_MODES:
        variant_name = f"aes128_{mode.lower()}"
        AES_IMPLEMENTATIONS[variant_name] = lambda m=mode, **kwargs: AESImplementation(
            key_size="128", mode=m, **kwargs
        )
