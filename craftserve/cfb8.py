"""AES in 8-bit cipher feedback mode, the stream cipher used on encrypted connections."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16


class CFB8:
    """A CFB8 stream over AES; each call continues where the previous one stopped."""

    def __init__(self, key: bytes, iv: bytes, decrypt: bool) -> None:
        self._encryptor = Cipher(algorithms.AES(bytes(key)), modes.ECB()).encryptor()
        if len(iv) != BLOCK_SIZE:
            direction = "decrypt" if decrypt else "encrypt"
            raise ValueError(f"cfb8 {direction}: IV length must equal block size")
        self._register = bytearray(iv)
        self._decrypt = decrypt

    def xor_key_stream(self, data: bytes) -> bytes:
        """Encrypt or decrypt ``data`` and return the result."""
        out = bytearray()
        for byte in data:
            pad = self._encryptor.update(bytes(self._register))[0]
            if self._decrypt:
                feedback = byte
                out.append(byte ^ pad)
            else:
                feedback = byte ^ pad
                out.append(feedback)
            del self._register[0]
            self._register.append(feedback)
        return bytes(out)


def new_encrypt_and_decrypt(secret: bytes) -> tuple[CFB8, CFB8]:
    """An encrypting and a decrypting stream keyed by ``secret``, which is also the IV.

    Raises ValueError when the secret is not a valid 16-byte AES key.
    """
    return CFB8(secret, secret, False), CFB8(secret, secret, True)