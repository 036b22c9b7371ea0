"""
AES128 - textbook AES-128 block engine with ECB, CBC, OFB and CTR modes.
"""

# import core modules
from aes128.core import load_cipher_config, parse_hex, format_hex

# import AES engine and modes
from aes128.aes import (
    AESImplementation,
    CipherConfig,
    CustomAES,
    ChunkSize,
    SegmentSize,
    CounterWidth,
    AESError,
    InvalidBlockSizeError,
    InvalidIVLengthError,
    InvalidParameterError,
    MisalignedCiphertextError,
    InternalConsistencyError,
    ConfigurationIncompleteError,
    aes_ecb,
    aes_cbc,
    aes_ofb,
    aes_ctr,
    get_implementation,
    list_implementations
)

__version__ = "0.1.0"

__all__ = [
    'load_cipher_config',
    'parse_hex',
    'format_hex',
    'AESImplementation',
    'CipherConfig',
    'CustomAES',
    'ChunkSize',
    'SegmentSize',
    'CounterWidth',
    'AESError',
    'InvalidBlockSizeError',
    'InvalidIVLengthError',
    'InvalidParameterError',
    'MisalignedCiphertextError',
    'InternalConsistencyError',
    'ConfigurationIncompleteError',
    'aes_ecb',
    'aes_cbc',
    'aes_ofb',
    'aes_ctr',
    'get_implementation',
    'list_implementations',
]
