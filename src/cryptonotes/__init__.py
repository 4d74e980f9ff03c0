"""Passphrase-based encryption of text, files and directory trees."""

from cryptonotes.core import (CryptonotesError, DecryptionError, IntegrityError,
                              TreeTranscodeError, decrypt_dir, decrypt_file,
                              decrypt_text, encrypt_dir, encrypt_file,
                              encrypt_text)

__version__ = "0.1.0"

__all__ = [
    "CryptonotesError",
    "DecryptionError",
    "IntegrityError",
    "TreeTranscodeError",
    "decrypt_dir",
    "decrypt_file",
    "decrypt_text",
    "encrypt_dir",
    "encrypt_file",
    "encrypt_text",
    "__version__",
]
