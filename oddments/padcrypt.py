"""One-time-pad file encryption with a key file at least as long as the data.

An encrypted file starts with a 50-byte header that holds the original
file name, itself encrypted with the first 50 bytes of the key.
"""

from __future__ import annotations

import os
import sys
from typing import BinaryIO

__all__ = [
    "CryptError",
    "xor_bytes",
    "encrypt_file",
    "read_stored_name",
    "decrypt_file",
    "main",
]

NAME_LENGTH = 50
_CHUNK = 512
_USAGE = "Usage: crypt keyfile cryptfile [encrypt]\n"


class CryptError(Exception):
    """Raised when the key or the encrypted file cannot be used.

    ``status`` is the exit status the command reports for the failure.
    """

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


def xor_bytes(data: bytes, key: bytes) -> bytes:
    """XOR ``data`` with the start of ``key``, which must be long enough."""
    if len(key) < len(data):
        raise ValueError("key is shorter than data")
    size = len(data)
    if not size:
        return b""
    mixed = int.from_bytes(data, "big") ^ int.from_bytes(key[:size], "big")
    return mixed.to_bytes(size, "big")


def _xor_stream(key_file: BinaryIO, source: BinaryIO, target: BinaryIO) -> None:
    while chunk := source.read(_CHUNK):
        target.write(xor_bytes(chunk, key_file.read(len(chunk))))


def _require_key_covers(key_path, data_path) -> None:
    if os.stat(key_path).st_size < os.stat(data_path).st_size:
        raise CryptError("Keyfile is smaller than cryptfile.", 6)


def _read_header(key_file: BinaryIO, source: BinaryIO) -> str:
    header = source.read(NAME_LENGTH)
    if len(header) < NAME_LENGTH:
        raise CryptError("Bad cryptfile length.", 7)
    name = xor_bytes(header, key_file.read(NAME_LENGTH))
    return os.fsdecode(name.split(b"\0", 1)[0])


def encrypt_file(key_path, data_path, output_path) -> None:
    """Encrypt ``data_path`` into ``output_path``, storing its name in the header."""
    key_size = os.stat(key_path).st_size
    data_size = os.stat(data_path).st_size
    if key_size < data_size + NAME_LENGTH:
        raise CryptError(
            "Keyfile is too small (must be at least 50 bytes longer than cryptfile).",
            3,
        )
    header = os.fsencode(data_path)[:NAME_LENGTH].ljust(NAME_LENGTH, b"\0")
    with open(key_path, "rb") as key_file, open(data_path, "rb") as source, open(
        output_path, "wb"
    ) as target:
        target.write(xor_bytes(header, key_file.read(NAME_LENGTH)))
        _xor_stream(key_file, source, target)


def read_stored_name(key_path, data_path) -> str:
    """Decrypt and return the file name held in an encrypted file's header."""
    _require_key_covers(key_path, data_path)
    with open(key_path, "rb") as key_file, open(data_path, "rb") as source:
        return _read_header(key_file, source)


def decrypt_file(key_path, data_path, output_path) -> str:
    """Decrypt ``data_path`` into ``output_path``; return the stored name."""
    _require_key_covers(key_path, data_path)
    with open(key_path, "rb") as key_file, open(data_path, "rb") as source:
        name = _read_header(key_file, source)
        with open(output_path, "wb") as target:
            _xor_stream(key_file, source, target)
    return name


def _read_word() -> str | None:
    for line in sys.stdin:
        words = line.split()
        if words:
            return words[0]
    return None


def main(argv: list[str] | None = None) -> int:
    """Encrypt (with a trailing ``encrypt`` argument) or decrypt a file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (2, 3):
        sys.stdout.write(_USAGE)
        return 1
    if len(args) == 3 and args[2] != "encrypt":
        sys.stdout.write(_USAGE)
        return 5
    key_path, data_path = args[0], args[1]

    try:
        if len(args) == 3:
            key_size = os.stat(key_path).st_size
            data_size = os.stat(data_path).st_size
            if key_size < data_size + NAME_LENGTH:
                raise CryptError(
                    "Keyfile is too small "
                    "(must be at least 50 bytes longer than cryptfile).",
                    3,
                )
            sys.stdout.write("Enter a name for the output file:\n")
            sys.stdout.flush()
            output = _read_word()
            if output is None:
                return 1
            encrypt_file(key_path, data_path, output)
        else:
            name = read_stored_name(key_path, data_path)
            sys.stdout.write(f'Filename: "{name}".\nAccept (y/n) ')
            sys.stdout.flush()
            answer = _read_word() or ""
            if answer[:1] not in ("y", "Y"):
                sys.stdout.write("Quitting! Bad key or datafile...\n")
                return 4
            decrypt_file(key_path, data_path, name)
    except CryptError as err:
        sys.stdout.write(f"Error: {err}\n")
        return err.status
    except OSError as err:
        print(f"stat: {err}", file=sys.stderr)
        return 2

    sys.stdout.write("All done! Please destroy the key file!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())