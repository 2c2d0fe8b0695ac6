"""In-toto statements wrapped in signed DSSE envelopes."""

from __future__ import annotations

import base64
import json
from datetime import UTC, datetime
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from jfrog_cli_artifactory.evidence.keys import SigningKey, VerifyingKey

STATEMENT_TYPE = "https://in-toto.io/Statement/v1"
PAYLOAD_TYPE = "application/vnd.in-toto+json"


def build_statement(
    subject_sha256: str,
    predicate_type: str,
    predicate: Any,
    *,
    markdown: str | None = None,
    created_at: datetime | None = None,
) -> dict[str, Any]:
    """Return an in-toto v1 statement attesting ``predicate`` about one digest."""
    timestamp = (created_at or datetime.now(tz=UTC)).astimezone(UTC)
    statement: dict[str, Any] = {
        "_type": STATEMENT_TYPE,
        "subject": [{"digest": {"sha256": subject_sha256}}],
        "predicateType": predicate_type,
        "predicate": predicate,
        "createdAt": timestamp.strftime("%Y-%m-%dT%H:%M:%S.") + f"{timestamp.microsecond // 1000:03d}Z",
    }
    if markdown:
        statement["markdown"] = markdown
    return statement


def pre_auth_encoding(payload_type: str, payload: bytes) -> bytes:
    """Return the DSSE v1 pre-authentication encoding of a payload."""
    encoded_type = payload_type.encode("utf-8")
    return b" ".join(
        [
            b"DSSEv1",
            str(len(encoded_type)).encode("ascii"),
            encoded_type,
            str(len(payload)).encode("ascii"),
            payload,
        ]
    )


def _sign(key: SigningKey, message: bytes) -> bytes:
    if isinstance(key, Ed25519PrivateKey):
        return key.sign(message)
    if isinstance(key, RSAPrivateKey):
        return key.sign(
            message,
            padding.PSS(mgf=padding.MGF1(hashes.SHA256()), salt_length=padding.PSS.DIGEST_LENGTH),
            hashes.SHA256(),
        )
    return key.sign(message, ec.ECDSA(hashes.SHA256()))


def _verify(key: VerifyingKey, signature: bytes, message: bytes) -> None:
    if isinstance(key, Ed25519PublicKey):
        key.verify(signature, message)
    elif isinstance(key, RSAPublicKey):
        key.verify(
            signature,
            message,
            padding.PSS(mgf=padding.MGF1(hashes.SHA256()), salt_length=padding.PSS.AUTO),
            hashes.SHA256(),
        )
    else:
        key.verify(signature, message, ec.ECDSA(hashes.SHA256()))


def sign_envelope(
    statement: dict[str, Any], key: SigningKey, *, key_id: str | None = None
) -> dict[str, Any]:
    """Serialize ``statement`` and return a DSSE envelope signed with ``key``."""
    payload = json.dumps(statement, separators=(",", ":")).encode("utf-8")
    signature = _sign(key, pre_auth_encoding(PAYLOAD_TYPE, payload))
    return {
        "payload": base64.b64encode(payload).decode("ascii"),
        "payloadType": PAYLOAD_TYPE,
        "signatures": [
            {
                "keyid": key_id or "",
                "sig": base64.b64encode(signature).decode("ascii"),
            }
        ],
    }


def verify_envelope(envelope: dict[str, Any], key: VerifyingKey) -> bool:
    """Return whether any envelope signature verifies with ``key``."""
    payload_type = envelope.get("payloadType")
    raw_payload = envelope.get("payload")
    if not isinstance(payload_type, str) or not isinstance(raw_payload, str):
        return False
    message = pre_auth_encoding(payload_type, base64.b64decode(raw_payload))
    for entry in envelope.get("signatures", []):
        sig = entry.get("sig") if isinstance(entry, dict) else None
        if not isinstance(sig, str):
            continue
        try:
            _verify(key, base64.b64decode(sig), message)
        except InvalidSignature:
            continue
        return True
    return False


def decode_payload(envelope: dict[str, Any]) -> dict[str, Any]:
    """Return the statement carried by an envelope."""
    return json.loads(base64.b64decode(envelope["payload"]))
