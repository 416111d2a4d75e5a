"""
DKG result signatures.

Each participant signs keccak256(dkg_public_key) with its role key. The chain
expects 65-byte signatures, so a fixed v byte is appended to the 64-byte r || s.
"""

from typing import Union

from coincurve import PublicKey
from web3 import Web3

from tanglejobs.keys import RoleKey

SIGNATURE_LENGTH = 65
# lowR = false → 28
RECOVERY_BYTE = 28


def hash_public_key(public_key: bytes) -> bytes:
    """keccak256 of the raw public key bytes (32 bytes)."""
    return bytes(Web3.keccak(public_key))


def to_hex(data: Union[bytes, bytearray]) -> str:
    """0x-prefixed lowercase hex."""
    return Web3.to_hex(bytes(data))


def sign_dkg_key(role_key: RoleKey, dkg_public_key: bytes, v: int = RECOVERY_BYTE) -> bytes:
    """
    Sign the hash of dkg_public_key with role_key and append v.

    v is a fixed marker, not the recovery id of the signature.
    Raises ValueError if the result is not 65 bytes.
    """
    digest = hash_public_key(dkg_public_key)
    signature = role_key.sign_digest(digest) + bytes([v])
    if len(signature) != SIGNATURE_LENGTH:
        raise ValueError(f"Signature length is invalid: {len(signature)} (expected {SIGNATURE_LENGTH})")
    return signature


def verify_dkg_signature(role_public_key: bytes, dkg_public_key: bytes, signature: bytes) -> bool:
    """
    True if signature is 65 bytes and its first 64 bytes are a valid signature
    by role_public_key over keccak256(dkg_public_key).

    The trailing byte carries no recovery info, so both recovery ids are tried.
    """
    if len(signature) != SIGNATURE_LENGTH:
        return False
    digest = hash_public_key(dkg_public_key)
    expected = PublicKey(role_public_key).format(compressed=True)
    for rec_id in (0, 1):
        try:
            recovered = PublicKey.from_signature_and_message(
                signature[:64] + bytes([rec_id]), digest, hasher=None
            )
        except ValueError:
            continue
        if recovered.format(compressed=True) == expected:
            return True
    return False
