"""Loading of PEM signing keys used for evidence envelopes."""

from __future__ import annotations

from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePrivateKey, EllipticCurvePublicKey
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from jfrog_cli_artifactory.errors import KeyNotFoundError, ValidationError

SigningKey = Ed25519PrivateKey | EllipticCurvePrivateKey | RSAPrivateKey
VerifyingKey = Ed25519PublicKey | EllipticCurvePublicKey | RSAPublicKey

_PEM_MARKER = b"-----BEGIN"
_PUBLIC_MARKER = b"PUBLIC KEY-----"
_PRIVATE_MARKER = b"PRIVATE KEY-----"


def load_key_content(key: str) -> bytes:
    """Return PEM content from either inline PEM text or a key file path."""
    if key.lstrip().startswith(_PEM_MARKER.decode("ascii")):
        return key.encode("utf-8")
    path = Path(key).expanduser()
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ValidationError(f"failed to read signing key {path}: {exc}") from exc


def read_private_key(content: bytes) -> SigningKey:
    """Load the private half of a PEM key pair.

    Raises ``KeyNotFoundError`` when the content carries no private key, for
    example a bare public key.
    """
    if _PRIVATE_MARKER not in content:
        raise KeyNotFoundError("the provided key content does not hold a private key")
    try:
        key = serialization.load_pem_private_key(content, password=None)
    except (ValueError, TypeError) as exc:
        raise ValidationError(f"failed to load private key: {exc}") from exc
    if not isinstance(key, (Ed25519PrivateKey, EllipticCurvePrivateKey, RSAPrivateKey)):
        raise ValidationError(
            f"unsupported private key type {type(key).__name__}; "
            "expected ed25519, ecdsa or rsa"
        )
    return key


def read_public_key(content: bytes) -> VerifyingKey:
    """Load the public half of a PEM key pair, deriving it from a private key if needed."""
    if _PUBLIC_MARKER in content:
        try:
            key = serialization.load_pem_public_key(content)
        except (ValueError, TypeError) as exc:
            raise ValidationError(f"failed to load public key: {exc}") from exc
        if not isinstance(key, (Ed25519PublicKey, EllipticCurvePublicKey, RSAPublicKey)):
            raise ValidationError(f"unsupported public key type {type(key).__name__}")
        return key
    if _PRIVATE_MARKER in content:
        return read_private_key(content).public_key()
    raise KeyNotFoundError("the provided key content does not hold a public key")
