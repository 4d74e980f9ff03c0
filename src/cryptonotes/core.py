#!/usr/bin/env python3
"""ChaCha20-Poly1305 text, file and directory-tree encryption.

:license: MIT

Encrypts text, single files, or whole directory trees with
ChaCha20-Poly1305 authenticated encryption, using PBKDF2-HMAC-SHA256 for
key derivation.  Files are rewritten in place under an encrypted name;
directory trees keep their shape, but every directory and file name below
the root is replaced by its own ciphertext token.

Formats
-------
Token (text output and encrypted names)::

    base64(ciphertext || 16 B tag) with "/" replaced by "-"

File contents::

    [N B]  ciphertext            [16 B] Poly1305 tag

* Key — ``PBKDF2-HMAC-SHA256(passphrase, "nosalt", 10000)``, 32 bytes.
* Nonce — 12 zero bytes, shared by every message.

The fixed salt and nonce make encryption deterministic: the same
passphrase and plaintext always give the same token, which is what lets a
directory name map to one encrypted name however many files sit beneath
it.  The price is that two messages under one passphrase share a
keystream, so confidentiality rests entirely on the passphrase.

Examples
--------
Text::

    $ cryptonotes encrypt-text "my super secret" mypass123
    $ cryptonotes decrypt-text <token> mypass123

Files and directories (prompting for the passphrase)::

    $ cryptonotes encrypt-file private/MySecrets/README.MD
    $ cryptonotes encrypt-dir private/ -v --workers 8
    $ cryptonotes decrypt-dir private/ -v
"""

from __future__ import annotations

import argparse
import base64
import binascii
import os
import shutil
import sys
import tempfile
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from getpass import getpass
from typing import BinaryIO, Literal

from cryptography.exceptions import InvalidSignature, InvalidTag
from cryptography.hazmat.primitives import hashes, poly1305
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

# ── Constants ────────────────────────────────────────────────────────────────

DEFAULT_SALT = "nosalt"
KDF_ITERATIONS = 10_000

KEY_SIZE = 32      # ChaCha20 key size in bytes
TAG_SIZE = 16      # Poly1305 tag size in bytes
NONCE = bytes(12)  # 96-bit all-zero nonce, shared by every message

DEFAULT_CHUNK_SIZE = 2**16  # 64 KiB
DEFAULT_MAX_WORKERS = min(32, (os.cpu_count() or 1) + 4)

Direction = Literal["encrypt", "decrypt"]


# ── Errors ───────────────────────────────────────────────────────────────────

class CryptonotesError(Exception):
    """Base class for every error raised by cryptonotes."""


class DecryptionError(CryptonotesError, ValueError):
    """Authentication failed: wrong passphrase, or corrupted/truncated data."""

    def __init__(self, message: str = "Failed to decrypt") -> None:
        super().__init__(message)


class IntegrityError(CryptonotesError):
    """The encrypted output did not decrypt back to the original content."""


class TreeTranscodeError(CryptonotesError):
    """One or more entries failed during a directory operation.

    ``failures`` holds ``(relative_path, exception)`` pairs, one per failed
    file or directory, in completion order.
    """

    def __init__(
        self,
        direction: Direction,
        root: str,
        failures: list[tuple[str, BaseException]],
    ) -> None:
        self.direction = direction
        self.root = root
        self.failures = failures
        details = "; ".join(
            f"{rel}: {type(exc).__name__}: {exc}" for rel, exc in failures
        )
        super().__init__(
            f"Failed to {direction} {len(failures)} path(s) under {root}: {details}"
        )


# ── Key derivation ───────────────────────────────────────────────────────────

def derive_key(
    passphrase: str,
    salt: str | bytes = DEFAULT_SALT,
    iterations: int = KDF_ITERATIONS,
) -> bytes:
    """Derive a 256-bit ChaCha20 key from *passphrase* using PBKDF2-HMAC-SHA256."""
    if isinstance(salt, str):
        salt = salt.encode("utf-8")
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_SIZE,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(passphrase.encode("utf-8"))


# ── Token codec ──────────────────────────────────────────────────────────────

def escape_token(b64: str) -> str:
    """Make a Base64 string safe to use as a file or directory name."""
    return b64.replace("/", "-")


def unescape_token(token: str) -> str:
    """Inverse of :func:`escape_token`."""
    return token.replace("-", "/")


# ── Authenticated cipher ─────────────────────────────────────────────────────

def seal(plaintext: bytes, key: bytes) -> bytes:
    """Encrypt *plaintext*, returning ``ciphertext || tag``."""
    return ChaCha20Poly1305(key).encrypt(NONCE, plaintext, None)


def open_sealed(data: bytes, key: bytes) -> bytes:
    """Decrypt ``ciphertext || tag`` produced by :func:`seal`.

    Raises
    ------
    DecryptionError
        If the tag does not verify.
    """
    try:
        return ChaCha20Poly1305(key).decrypt(NONCE, data, None)
    except InvalidTag as exc:
        raise DecryptionError() from exc


def encrypt_text(plaintext: str, passphrase: str) -> str:
    """Encrypt *plaintext* into a filesystem-safe token."""
    sealed = seal(plaintext.encode("utf-8"), derive_key(passphrase))
    return escape_token(base64.b64encode(sealed).decode("ascii"))


def decrypt_text(token: str, passphrase: str) -> str:
    """Decrypt a token produced by :func:`encrypt_text`.

    Raises
    ------
    DecryptionError
        Wrong passphrase, tampered token, or a string that is not a token.
    """
    try:
        data = base64.b64decode(unescape_token(token), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecryptionError() from exc
    return open_sealed(data, derive_key(passphrase)).decode("utf-8")


# ── Streaming cipher ─────────────────────────────────────────────────────────
#
# The AEAD class in ``cryptography`` only works on whole buffers, so large
# files are sealed with the RFC 8439 construction built from its ChaCha20
# stream cipher and incremental Poly1305 MAC.  The output is byte-identical
# to ``ChaCha20Poly1305.encrypt`` with no associated data.

def _chacha20(key: bytes, counter: int) -> Cipher:
    # cryptography takes a 16-byte nonce: 4-byte LE block counter + 12-byte nonce
    return Cipher(algorithms.ChaCha20(key, counter.to_bytes(4, "little") + NONCE), mode=None)


def _poly1305_key(key: bytes) -> bytes:
    """One-time Poly1305 key: the first 32 bytes of keystream block 0."""
    return _chacha20(key, 0).encryptor().update(bytes(32))


def _mac_trailer(length: int) -> bytes:
    """Padding and length block that closes the Poly1305 input (empty AAD)."""
    return bytes(-length % 16) + (0).to_bytes(8, "little") + length.to_bytes(8, "little")


class _StreamSealer:
    """Incrementally encrypts data and accumulates its authentication tag."""

    def __init__(self, key: bytes) -> None:
        self._ctx = _chacha20(key, 1).encryptor()
        self._mac = poly1305.Poly1305(_poly1305_key(key))
        self._length = 0

    def update(self, data: bytes) -> bytes:
        ciphertext = self._ctx.update(data)
        self._mac.update(ciphertext)
        self._length += len(ciphertext)
        return ciphertext

    def finalize(self) -> bytes:
        """Return the 16-byte tag."""
        self._ctx.finalize()
        self._mac.update(_mac_trailer(self._length))
        return self._mac.finalize()


class _StreamOpener:
    """Incrementally decrypts data; :meth:`finalize` checks the tag."""

    def __init__(self, key: bytes) -> None:
        self._ctx = _chacha20(key, 1).decryptor()
        self._mac = poly1305.Poly1305(_poly1305_key(key))
        self._length = 0

    def update(self, ciphertext: bytes) -> bytes:
        self._mac.update(ciphertext)
        self._length += len(ciphertext)
        return self._ctx.update(ciphertext)

    def finalize(self, tag: bytes) -> None:
        self._ctx.finalize()
        self._mac.update(_mac_trailer(self._length))
        try:
            self._mac.verify(tag)
        except InvalidSignature as exc:
            raise DecryptionError() from exc


def seal_stream(
    src: BinaryIO,
    dst: BinaryIO,
    key: bytes,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Encrypt *src* into *dst* as ``ciphertext || tag``.

    Returns the number of plaintext bytes processed.
    """
    sealer = _StreamSealer(key)
    total = 0
    while data := src.read(chunk_size):
        dst.write(sealer.update(data))
        total += len(data)
    dst.write(sealer.finalize())
    return total


def open_stream(
    src: BinaryIO,
    dst: BinaryIO,
    key: bytes,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Decrypt ``ciphertext || tag`` from *src* into *dst*.

    The last :data:`TAG_SIZE` bytes read are held back as the tag, so memory
    use stays bounded by *chunk_size*.  Plaintext is written to *dst* before
    the tag is checked; on :class:`DecryptionError` the caller must discard
    whatever was written.

    Returns the number of plaintext bytes written.
    """
    opener = _StreamOpener(key)
    pending = b""
    total = 0
    while data := src.read(chunk_size):
        pending += data
        if len(pending) > TAG_SIZE:
            plaintext = opener.update(pending[:-TAG_SIZE])
            dst.write(plaintext)
            total += len(plaintext)
            pending = pending[-TAG_SIZE:]
    if len(pending) < TAG_SIZE:
        raise DecryptionError()
    opener.finalize(pending)
    return total


# ── Integrity verification ───────────────────────────────────────────────────

def _file_digest(path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """MD5 of the file at *path*; used for corruption detection only."""
    digest = hashes.Hash(hashes.MD5())
    with open(path, "rb") as f:
        while data := f.read(chunk_size):
            digest.update(data)
    return digest.finalize()


def ensure_integrity(
    original_path: str,
    encrypted_path: str,
    key: bytes,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """Check that *encrypted_path* decrypts back to *original_path*.

    The encrypted file is decrypted to a private scratch file, which is
    removed whether or not the check passes.

    Raises
    ------
    IntegrityError
        If the decrypted content differs from the original, or the written
        ciphertext no longer authenticates.
    """
    fd, scratch = tempfile.mkstemp(prefix=f"{time.time_ns()}-", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as dst, open(encrypted_path, "rb") as src:
            try:
                open_stream(src, dst, key, chunk_size=chunk_size)
            except DecryptionError as exc:
                raise IntegrityError(
                    f"Encrypted output does not authenticate: {encrypted_path}"
                ) from exc
        if _file_digest(original_path, chunk_size) != _file_digest(scratch, chunk_size):
            raise IntegrityError(
                f"Checksums do not match: {original_path} -> {encrypted_path}"
            )
    finally:
        if os.path.exists(scratch):
            os.remove(scratch)


# ── File transcoding ─────────────────────────────────────────────────────────

def _sibling_path(path: str, name: str) -> str:
    """Replace the base name of *path* with *name*, keeping its directory."""
    parent = os.path.dirname(path)
    return os.path.join(parent, name) if parent else name


def encrypt_file(
    input_path: str,
    passphrase: str,
    output_path: str | None = None,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    verbose: bool = False,
) -> bool:
    """Encrypt *input_path* and replace it with the encrypted file.

    Parameters
    ----------
    input_path : str
        Path to the plaintext file.
    passphrase : str
        Encryption passphrase (fed into PBKDF2).
    output_path : str | None
        Destination for the ciphertext.  Defaults to the same directory,
        with the base name replaced by its token.
    chunk_size : int
        Bytes read per streaming step (default 64 KiB).
    verbose : bool
        Print a status line to stderr.

    Returns
    -------
    bool
        ``True`` once the original has been removed.

    Raises
    ------
    FileNotFoundError
        If *input_path* is not a regular file.
    IntegrityError
        If verification fails; both the original and the encrypted output
        are left in place.
    """
    if not os.path.isfile(input_path):
        raise FileNotFoundError(f"Input file not found: {input_path}")

    if output_path is None:
        output_path = _sibling_path(
            input_path, encrypt_text(os.path.basename(input_path), passphrase)
        )

    key = derive_key(passphrase)
    with open(input_path, "rb") as src, open(output_path, "wb") as dst:
        size = seal_stream(src, dst, key, chunk_size=chunk_size)

    ensure_integrity(input_path, output_path, key, chunk_size=chunk_size)
    os.remove(input_path)

    if verbose:
        _log(f"Encrypted {input_path} → {output_path} ({_format_size(size)})")
    return True


def decrypt_file(
    input_path: str,
    passphrase: str,
    output_path: str | None = None,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    verbose: bool = False,
) -> bool:
    """Decrypt *input_path* and replace it with the plaintext file.

    When *output_path* is omitted, the base name is decrypted as a token.

    Raises
    ------
    FileNotFoundError
        If *input_path* is not a regular file.
    DecryptionError
        Wrong passphrase, corrupted data, or a name that is not a token.
        Partial output is removed and the encrypted file is kept.
    """
    if not os.path.isfile(input_path):
        raise FileNotFoundError(f"Input file not found: {input_path}")

    if output_path is None:
        output_path = _sibling_path(
            input_path, decrypt_text(os.path.basename(input_path), passphrase)
        )

    key = derive_key(passphrase)
    try:
        with open(input_path, "rb") as src, open(output_path, "wb") as dst:
            size = open_stream(src, dst, key, chunk_size=chunk_size)
    except Exception:
        # Remove partial output on failure
        if os.path.isfile(output_path):
            os.remove(output_path)
        raise

    os.remove(input_path)

    if verbose:
        _log(f"Decrypted {input_path} → {output_path} ({_format_size(size)})")
    return True


# ── Tree transcoding ─────────────────────────────────────────────────────────

DIRECTIONS: tuple[Direction, ...] = ("encrypt", "decrypt")


def _split_segments(rel_path: str) -> list[str]:
    """Split a relative path into its directory segments and leaf name."""
    return [s for s in rel_path.split(os.sep) if s and s != os.curdir]


def _transcode_rel_path(rel_path: str, passphrase: str, direction: Direction) -> str:
    """Transcode every segment of *rel_path* on its own and rejoin them."""
    transcode = encrypt_text if direction == "encrypt" else decrypt_text
    return os.path.join(*(transcode(s, passphrase) for s in _split_segments(rel_path)))


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def _collect_tree(root: str) -> tuple[list[str], list[str]]:
    """Walk *root* and return ``(files, empty_dirs)`` relative to it.

    Raises the first :class:`OSError` met while listing a directory, so an
    unreadable subtree fails the operation before anything is changed.
    """
    files: list[str] = []
    empty_dirs: list[str] = []
    for dirpath, dirs, filenames in os.walk(root, onerror=_raise_walk_error):
        rel = os.path.relpath(dirpath, root)
        if rel != os.curdir and not dirs and not filenames:
            empty_dirs.append(rel)
        for fname in sorted(filenames):
            files.append(os.path.normpath(os.path.join(rel, fname)))
    return files, empty_dirs


def _transcode_one(
    root: str,
    rel_path: str,
    passphrase: str,
    direction: Direction,
    chunk_size: int,
) -> str:
    """Worker task: transcode one file of the tree into its new location."""
    dest = os.path.join(root, _transcode_rel_path(rel_path, passphrase, direction))
    os.makedirs(os.path.dirname(dest), exist_ok=True)
    source = os.path.join(root, rel_path)
    if direction == "encrypt":
        encrypt_file(source, passphrase, dest, chunk_size=chunk_size)
    else:
        decrypt_file(source, passphrase, dest, chunk_size=chunk_size)
    return dest


def _transcode_empty_dir(root: str, rel_path: str, passphrase: str, direction: Direction) -> str:
    """Worker task: recreate an empty directory under its transcoded name."""
    dest = os.path.join(root, _transcode_rel_path(rel_path, passphrase, direction))
    os.makedirs(dest, exist_ok=True)
    return dest


def transcode_dir(
    root: str,
    passphrase: str,
    direction: Direction,
    *,
    max_workers: int | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    verbose: bool = False,
) -> None:
    """Encrypt or decrypt every file and directory name beneath *root*.

    Each path segment is transcoded independently, so the tree keeps its
    depth while every name below *root* changes.  Files and empty
    directories are processed concurrently by a pool of *max_workers*
    threads; once every task has settled, the original top-level
    subdirectories are removed.  *root* itself is never renamed or removed.

    Parameters
    ----------
    root : str
        Directory whose contents are transcoded.
    passphrase : str
        Encryption passphrase.
    direction : {"encrypt", "decrypt"}
        Which way to transcode.
    max_workers : int | None
        Worker threads (default :data:`DEFAULT_MAX_WORKERS`).
    chunk_size : int
        Bytes read per streaming step.
    verbose : bool
        Print per-entry progress to stderr.

    Raises
    ------
    ValueError
        If *direction* is not ``"encrypt"`` or ``"decrypt"``.
    NotADirectoryError
        If *root* is not a directory.
    OSError
        If part of the tree cannot be listed; nothing has been changed.
    TreeTranscodeError
        If any entry failed, raised after all entries have settled; the
        original subdirectories are kept so no unprocessed file is lost.
        Also raised when an original top-level directory received
        transcoded output: it is kept, and every other original directory
        is still removed.
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction {direction!r} (expected one of {DIRECTIONS})")
    if not os.path.isdir(root):
        raise NotADirectoryError(f"Not a directory: {root}")

    top_dirs = sorted(
        entry.name for entry in os.scandir(root)
        if entry.is_dir(follow_symlinks=False)
    )
    files, empty_dirs = _collect_tree(root)
    total = len(files) + len(empty_dirs)
    label = f"{direction.capitalize()}ing"

    if verbose:
        _log(f"{label} {len(files)} file(s) and {len(empty_dirs)} empty dir(s) under {root}")

    failures: list[tuple[str, BaseException]] = []
    written_tops: set[str] = set()
    done = 0
    with ThreadPoolExecutor(max_workers=max_workers or DEFAULT_MAX_WORKERS) as pool:
        futures: dict[Future[str], str] = {
            pool.submit(_transcode_one, root, rel, passphrase, direction, chunk_size): rel
            for rel in files
        }
        futures.update(
            (pool.submit(_transcode_empty_dir, root, rel, passphrase, direction), rel)
            for rel in empty_dirs
        )
        for future in as_completed(futures):
            exc = future.exception()
            if exc is not None:
                failures.append((futures[future], exc))
            else:
                written_tops.add(_split_segments(os.path.relpath(future.result(), root))[0])
            done += 1
            if verbose:
                _progress_bar(done, total, label, unit="entries")

    if verbose and total:
        print(file=sys.stderr)

    if failures:
        raise TreeTranscodeError(direction, root, failures)

    # an original directory that now also holds output must survive cleanup
    for name in top_dirs:
        if name not in written_tops:
            shutil.rmtree(os.path.join(root, name))

    overlaps = [name for name in top_dirs if name in written_tops]
    if overlaps:
        raise TreeTranscodeError(
            direction,
            root,
            [
                (name, FileExistsError(f"kept original directory holding {direction}ed output"))
                for name in overlaps
            ],
        )


def encrypt_dir(
    root: str,
    passphrase: str,
    *,
    max_workers: int | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    verbose: bool = False,
) -> None:
    """Encrypt the contents of *root* in place.  See :func:`transcode_dir`."""
    transcode_dir(
        root,
        passphrase,
        "encrypt",
        max_workers=max_workers,
        chunk_size=chunk_size,
        verbose=verbose,
    )


def decrypt_dir(
    root: str,
    passphrase: str,
    *,
    max_workers: int | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    verbose: bool = False,
) -> None:
    """Decrypt the contents of *root* in place.  See :func:`transcode_dir`."""
    transcode_dir(
        root,
        passphrase,
        "decrypt",
        max_workers=max_workers,
        chunk_size=chunk_size,
        verbose=verbose,
    )


# ── Progress reporting ───────────────────────────────────────────────────────

def _format_size(size_bytes: int | float) -> str:
    """Format *size_bytes* with an appropriate binary unit (B … TiB)."""
    for unit in ("B", "KiB", "MiB", "GiB", "TiB"):
        if abs(size_bytes) < 1024:
            return f"{size_bytes:.1f} {unit}" if unit != "B" else f"{int(size_bytes)} B"
        size_bytes /= 1024
    return f"{size_bytes:.1f} PiB"


def _progress_bar(current: int, total: int, label: str, *, unit: str = "items") -> None:
    """Print ``label: |████░░░░| pct% (cur/tot unit)`` to stderr."""
    if total <= 0:
        return
    pct = min(current / total, 1.0) * 100
    width = 40
    filled = int(width * current // total)
    bar = "█" * filled + "░" * (width - filled)
    print(
        f"\r{label}: |{bar}| {pct:5.1f}% ({current}/{total} {unit})",
        end="",
        flush=True,
        file=sys.stderr,
    )


def _log(msg: str) -> None:
    """Print a status line to stderr."""
    print(msg, file=sys.stderr)


# ── CLI helpers ──────────────────────────────────────────────────────────────

COMMANDS = (
    "encrypt-text",
    "decrypt-text",
    "encrypt-file",
    "decrypt-file",
    "encrypt-dir",
    "decrypt-dir",
)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _prompt_passphrase(confirm: bool = False) -> str:
    """Prompt interactively for a passphrase (hidden input)."""
    pw = getpass("Passphrase: ")
    if not pw:
        print("Error: passphrase cannot be empty.", file=sys.stderr)
        sys.exit(1)
    if confirm:
        if getpass("Confirm passphrase: ") != pw:
            print("Error: passphrases do not match.", file=sys.stderr)
            sys.exit(1)
    return pw


# ── Argument parser ──────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""
    from cryptonotes import __version__

    parser = argparse.ArgumentParser(
        prog="cryptonotes",
        description=(
            "Encrypt and decrypt text, files or directory trees using "
            "ChaCha20-Poly1305 with PBKDF2-HMAC-SHA256 key derivation. "
            "Files and directories are replaced in place under encrypted names."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  %(prog)s encrypt-text 'my super secret' mypass123\n"
            "  %(prog)s encrypt-file notes/todo.md\n"
            "  %(prog)s encrypt-dir private/ -v --workers 8\n"
            "  %(prog)s decrypt-dir private/ -v\n"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        choices=COMMANDS,
        help="Operation to perform.",
    )
    parser.add_argument(
        "target",
        help="Text, file path or directory path, depending on the command.",
    )
    parser.add_argument(
        "passphrase",
        nargs="?",
        default=None,
        help="Passphrase (prompted securely if omitted).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress bars and status messages.",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        metavar="N",
        help=f"Worker threads for directory commands (default: {DEFAULT_MAX_WORKERS}).",
    )
    return parser


# ── Entry point ──────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    verbose: bool = args.verbose

    passphrase = args.passphrase or _prompt_passphrase(
        confirm=args.command.startswith("encrypt"),
    )

    try:
        if args.command == "encrypt-text":
            print(encrypt_text(args.target, passphrase))
        elif args.command == "decrypt-text":
            print(decrypt_text(args.target, passphrase))
        elif args.command == "encrypt-file":
            encrypt_file(args.target, passphrase, verbose=verbose)
        elif args.command == "decrypt-file":
            decrypt_file(args.target, passphrase, verbose=verbose)
        elif args.command == "encrypt-dir":
            encrypt_dir(args.target, passphrase, max_workers=args.workers, verbose=verbose)
        elif args.command == "decrypt-dir":
            decrypt_dir(args.target, passphrase, max_workers=args.workers, verbose=verbose)
    except (CryptonotesError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if verbose:
        _log("Done.")


if __name__ == "__main__":
    main()
