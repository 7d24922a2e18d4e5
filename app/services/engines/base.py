from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class EncryptionResult:
    """Result of an encryption operation."""

    ciphertext: str
    key: Any
    final_positions: str
    letters_processed: int


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: Any
    final_positions: str
    letters_processed: int
    explanation: str


class CipherEngine(ABC):
    """
    Abstract base class for keyed cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt plaintext
    - decrypt_with_key(): Decrypt with a known key
    - generate_random_key(): Produce a usable key
    - validate_key(): Check a key without using it
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    description: str

    @abstractmethod
    def encrypt(self, plaintext: str, key: Any) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt_with_key(self, ciphertext: str, key: Any) -> DecryptionResult:
        """
        Decrypt with a known key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            DecryptionResult with plaintext and metadata
        """
        pass

    @abstractmethod
    def generate_random_key(self) -> Any:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    @abstractmethod
    def validate_key(self, key: Any) -> bool:
        """
        Validate that a key is valid for this cipher.

        Args:
            key: The key to validate

        Returns:
            True if key is valid
        """
        pass

    @abstractmethod
    def explain(self, ciphertext: str, plaintext: str, key: Any) -> str:
        """
        Generate human-readable explanation of the decryption.

        Args:
            ciphertext: The original ciphertext
            plaintext: The decrypted plaintext
            key: The key used

        Returns:
            Explanation string
        """
        pass
