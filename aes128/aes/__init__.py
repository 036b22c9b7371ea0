from .base import AESImplementationBase
from .implementation import (
    AESImplementation,
    create_custom_aes_implementation,
    create_stdlib_aes_implementation,
    register_all_aes_variants,
    AES_IMPLEMENTATIONS,
    register_aes_variant,
    get_implementation,
    list_implementations
)
from .custom_aes import CustomAES
from .config import CipherConfig, compute_inverse_sbox
from .key_utils import generate_key, get_iv, expand_key, format_key_size
from .aes_utils import ChunkSize, SegmentSize, CounterWidth
from .exceptions import (
    AESError,
    InvalidBlockSizeError,
    InvalidIVLengthError,
    InvalidParameterError,
    MisalignedCiphertextError,
    InternalConsistencyError,
    ConfigurationIncompleteError
)

from . import aes_ecb
from . import aes_cbc
from . import aes_ofb
from . import aes_ctr

register_all_aes_variants()
