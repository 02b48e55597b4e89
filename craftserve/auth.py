"""Server key pair, login hashing and the session-server join check."""

from __future__ import annotations

import hashlib
import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from functools import lru_cache

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

SESSION_SERVER_URL = "https://sessionserver.mojang.com/session/minecraft/hasJoined"


@dataclass
class Prop:
    name: str = ""
    data: str = ""
    sign: str | None = None


@dataclass
class Auth:
    uuid: str = ""
    name: str = ""
    properties: list[Prop] = field(default_factory=list)


@lru_cache(maxsize=None)
def _keys() -> tuple[rsa.RSAPrivateKey, bytes, bytes]:
    key = rsa.generate_private_key(public_exponent=65537, key_size=1024)
    private_der = key.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    )
    public_der = key.public_key().public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return key, private_der, public_der


def new_crypt() -> tuple[bytes, bytes]:
    """The server's key pair as DER: PKCS#1 private key and SubjectPublicKeyInfo public key.

    The pair is generated once and reused afterwards.
    """
    _, private_der, public_der = _keys()
    return private_der, public_der


def encrypt(data: bytes) -> bytes:
    """RSA PKCS#1 v1.5 encryption with the server's public key."""
    return _keys()[0].public_key().encrypt(bytes(data), padding.PKCS1v15())


def decrypt(data: bytes) -> bytes:
    """RSA PKCS#1 v1.5 decryption with the server's private key; raises ValueError on failure."""
    return _keys()[0].decrypt(bytes(data), padding.PKCS1v15())


def minecraft_hash(secret: bytes, public: bytes) -> str:
    """SHA-1 of secret then public key, as a signed hexadecimal number without leading zeros."""
    digest = hashlib.sha1(bytes(secret) + bytes(public)).digest()
    number = int.from_bytes(digest, "big", signed=True)
    text = format(abs(number), "x").lstrip("0")
    return "-" + text if number < 0 else text


def auth_url(name: str, server_hash: str) -> str:
    """The session-server URL that checks whether ``name`` joined with ``server_hash``."""
    return f"{SESSION_SERVER_URL}?username={name}&serverId={server_hash}"


def parse_auth(data: bytes | str) -> Auth:
    """Decode a session-server answer; raises ValueError when it is not a JSON object."""
    decoded = json.loads(data)
    if not isinstance(decoded, dict):
        raise ValueError("authentication response is not a JSON object")
    properties = [
        Prop(
            name=entry.get("name", ""),
            data=entry.get("value", ""),
            sign=entry.get("signature"),
        )
        for entry in decoded.get("properties") or []
    ]
    return Auth(
        uuid=decoded.get("id", ""),
        name=decoded.get("name", ""),
        properties=properties,
    )


def get_bytes(url: str) -> bytes:
    """The body of an HTTP GET of ``url``, whatever the response status."""
    try:
        with urllib.request.urlopen(url) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        return exc.read()


def get_text(url: str) -> str:
    return get_bytes(url).decode("utf-8", errors="replace")


def fetch_auth(secret: bytes, name: str) -> Auth:
    """Ask the session server whether ``name`` joined using the shared ``secret``."""
    _, public = new_crypt()
    return parse_auth(get_bytes(auth_url(name, minecraft_hash(secret, public))))