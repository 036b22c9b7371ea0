from .constants import BLOCK_SIZE
from .key_utils import generate_key


class AESImplementationBase:

    def __init__(self, key_size="128", mode="CBC", **kwargs):
        self.key_size = int(key_size)
        self.mode = mode.upper()
        self.name = "AES"
        self.description = f"AES-{key_size} in {self.mode} mode"
        self.key = None
        self.iv = kwargs.get('iv')
        self.size = kwargs.get('size', BLOCK_SIZE)
        self.counter_width = kwargs.get('counter_width', 8)
        self.is_custom = kwargs.get('is_custom', True)

    def generate_key(self):
        self.key = generate_key(self.key_size)
        return self.key

    def encrypt(self, data, key):
        raise NotImplementedError("Subclasses must implement this method")

    def decrypt(self, ciphertext, key):
        raise NotImplementedError("Subclasses must implement this method")
