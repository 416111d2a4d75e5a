"""
Dev identities and role keys.

Identities are sr25519 dev accounts (//Alice, //Bob) that sign extrinsics.
Role keys are secp256k1 key pairs from fixed seeds; they sign off-chain
artifacts (DKG result) that accompany a job result. Nothing is persisted.
"""

from typing import Optional

from coincurve import PrivateKey
from substrateinterface import Keypair, KeypairType

from tanglejobs.config import ss58_format

# From `subkey inspect //Alice --scheme Ecdsa`
ALICE_ROLE_SEED = "cb6df9de1efca7a3998a8ead4e02159d5fa99c3e0d4fd6432667390bb4726854"
# From `subkey inspect //Bob --scheme Ecdsa`
BOB_ROLE_SEED = "79c3b7fc0b7697b9414cb87adcb37317d1cab32818ae18c0e97ad76395d1fdcf"
# Stand-in for the key a real DKG round would output
DKG_SEED = "eec7245d6b7d2ccb30380bfbe2a3648cd7a942653f5aa340edcea1f283686619"


def dev_identity(name: str, ss58: Optional[int] = None) -> Keypair:
    """sr25519 dev account for name ("Alice" -> //Alice)."""
    name = name.strip().lstrip("/")
    return Keypair.create_from_uri(
        f"//{name.capitalize()}",
        ss58_format=ss58 if ss58 is not None else ss58_format(),
        crypto_type=KeypairType.SR25519,
    )


class RoleKey:
    """secp256k1 key pair derived from a 32-byte seed."""

    def __init__(self, private_key: PrivateKey):
        self._key = private_key

    @classmethod
    def from_seed(cls, seed: str) -> "RoleKey":
        """Create from hex seed (with or without 0x)."""
        if seed.startswith("0x"):
            seed = seed[2:]
        raw = bytes.fromhex(seed)
        if len(raw) != 32:
            raise ValueError(f"Role seed must be 32 bytes, got {len(raw)}")
        return cls(PrivateKey(raw))

    @property
    def seed(self) -> bytes:
        return self._key.secret

    @property
    def seed_hex(self) -> str:
        return "0x" + self._key.secret.hex()

    @property
    def public_key(self) -> bytes:
        """Compressed SEC1 public key (33 bytes)."""
        return self._key.public_key.format(compressed=True)

    @property
    def public_key_uncompressed(self) -> bytes:
        """Uncompressed SEC1 public key, 0x04 || X || Y (65 bytes)."""
        return self._key.public_key.format(compressed=False)

    def sign_digest(self, digest: bytes) -> bytes:
        """Sign a 32-byte digest as-is. Returns compact r || s (64 bytes), RFC 6979 nonce."""
        if len(digest) != 32:
            raise ValueError(f"Digest must be 32 bytes, got {len(digest)}")
        # sign_recoverable appends the recovery id; callers supply their own v
        return self._key.sign_recoverable(digest, hasher=None)[:64]


def alice_role() -> RoleKey:
    return RoleKey.from_seed(ALICE_ROLE_SEED)


def bob_role() -> RoleKey:
    return RoleKey.from_seed(BOB_ROLE_SEED)


def dkg_key() -> RoleKey:
    return RoleKey.from_seed(DKG_SEED)
