"""Weak obfuscation schemes expected by the game server: XOR cipher, GJP token, checksums.

None of this is real cryptography. The server recomputes the same transforms, so they must be
reproduced exactly.
"""

import base64
from itertools import cycle

from cryptography.hazmat.primitives import hashes

# XOR keys
ACCOUNT_PASSWORD_KEY = "37526"
MESSAGE_BODY_KEY = "14251"
LEVEL_RATING_KEY = "58281"

# Salt appended before hashing a star rating checksum
LEVEL_RATING_SALT = "ysg6pUrtjn0J"


def xor_cipher(data: bytes, key: str) -> bytes:
    """XOR every byte of data with the cycled key bytes. Applying it twice restores the input."""
    return bytes(b ^ k for b, k in zip(data, cycle(key.encode()), strict=False))


def encode_base64(text: str) -> str:
    """URL-safe base64 of the UTF-8 text."""
    return base64.urlsafe_b64encode(text.encode()).decode()


def decode_base64(text: str) -> str:
    """Inverse of ``encode_base64``. Tolerates missing padding.

    Raises:
        ValueError: Not valid base64 or not valid UTF-8.

    """
    padded = text + "=" * (-len(text) % 4)
    return base64.urlsafe_b64decode(padded.encode()).decode()


def encode_account_password(password: str) -> str:
    """Produce the GJP token the server expects in place of the account password."""
    return base64.urlsafe_b64encode(xor_cipher(password.encode(), ACCOUNT_PASSWORD_KEY)).decode()


def encode_message_body(body: str) -> str:
    """Obfuscate a private message body for upload."""
    return base64.urlsafe_b64encode(xor_cipher(body.encode(), MESSAGE_BODY_KEY)).decode()


def decode_message_body(encoded: str) -> str:
    """Inverse of ``encode_message_body``.

    Raises:
        ValueError: Not valid base64, or the deciphered bytes are not UTF-8.

    """
    padded = encoded + "=" * (-len(encoded) % 4)
    return xor_cipher(base64.urlsafe_b64decode(padded.encode()), MESSAGE_BODY_KEY).decode()


def sha1_hex(text: str) -> str:
    """Hex SHA-1 digest of the UTF-8 text."""
    digest = hashes.Hash(hashes.SHA1())  # noqa: S303  # nosec B303 - fixed by the server protocol
    digest.update(text.encode())
    return digest.finalize().hex()


def generate_chk(values: list[str], key: str, salt: str) -> str:
    """Compute a request checksum: base64(xor(sha1(values + salt), key))."""
    return base64.urlsafe_b64encode(xor_cipher(sha1_hex("".join(values) + salt).encode(), key)).decode()
