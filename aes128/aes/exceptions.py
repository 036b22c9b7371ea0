"""
AES128 - Error types
Every error is raised before any output buffer is returned to the caller.
"""


class AESError(Exception):
    """Base class for all errors raised by the AES engine and its modes."""


class InvalidBlockSizeError(AESError, ValueError):
    """A block handed to the engine is not exactly 16 bytes."""


class InvalidIVLengthError(AESError, ValueError):
    """An IV or counter block is not exactly 16 bytes."""


class InvalidParameterError(AESError, ValueError):
    """A chunk size, segment size or counter option is out of range."""


class MisalignedCiphertextError(AESError, ValueError):
    """ECB/CBC ciphertext length is not a multiple of the block size."""


class InternalConsistencyError(AESError, RuntimeError):
    """A partial AES block turned up outside the final chunk."""


class ConfigurationIncompleteError(AESError, ValueError):
    """S-box or round-key material is missing or malformed."""
