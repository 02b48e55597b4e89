"""A client connection: socket I/O, encryption, compression and packet framing."""

from __future__ import annotations

import secrets
import socket
import zlib
from typing import Any, Protocol

from craftserve.buffer import ConnBuffer
from craftserve.cfb8 import CFB8, new_encrypt_and_decrypt
from craftserve.game import Profile
from craftserve.packetstate import PacketState

_SILENT_PACKETS = frozenset({0x20, 0x4D, 0x28, 0x0D, 0x0C, 0x22})


class OutgoingPacket(Protocol):
    packet_id: int

    def push(self, writer: ConnBuffer, conn: "Connection") -> None:
        ...


def random_byte_array(length: int) -> bytes:
    """``length`` cryptographically random bytes."""
    return secrets.token_bytes(length)


class Connection:
    """One client's socket together with its protocol state."""

    def __init__(self, sock: socket.socket) -> None:
        self.is_new = True
        self.state = PacketState.SHAKE
        self.profile: Profile | None = None
        self.compression_enabled = False
        self.compression_threshold = 0
        self._sock = sock
        self._certify_name = ""
        self._certify_used = False
        self._certify_data = b""
        self._encrypt: CFB8 | None = None
        self._decrypt: CFB8 | None = None

    @property
    def certify_name(self) -> str:
        return self._certify_name

    @property
    def certify_data(self) -> bytes:
        return self._certify_data

    @property
    def encrypted(self) -> bool:
        return self._certify_used

    def address(self) -> Any:
        """The remote address of the socket."""
        return self._sock.getpeername()

    def encrypt(self, data: bytes) -> bytes:
        if not self._certify_used or self._encrypt is None:
            return data
        return self._encrypt.xor_key_stream(data)

    def decrypt(self, data: bytes) -> bytes:
        if not self._certify_used or self._decrypt is None:
            return data
        return self._decrypt.xor_key_stream(data)

    def certify_values(self, name: str) -> None:
        """Remember the player's name and make a fresh verify token."""
        self._certify_name = name
        self._certify_data = random_byte_array(4)

    def certify_update(self, secret: bytes) -> None:
        """Turn on encryption with the shared ``secret``."""
        try:
            self._encrypt, self._decrypt = new_encrypt_and_decrypt(secret)
        except ValueError as exc:
            raise ValueError(
                f"failed to enable encryption for user: {self._certify_name}\n{exc}"
            ) from exc
        self._certify_used = True
        self._certify_data = bytes(secret)

    def deflate(self, data: bytes) -> bytes:
        if not self.compression_enabled:
            return data
        return zlib.compress(data, 9)

    def inflate(self, data: bytes) -> bytes:
        if not self.compression_enabled:
            return data
        return zlib.decompressobj().decompress(data)

    def pull(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means the peer closed."""
        return self._sock.recv(size)

    def push(self, data: bytes) -> int:
        self._sock.sendall(data)
        return len(data)

    def stop(self) -> None:
        self._sock.close()

    def send_packet(self, packet: OutgoingPacket) -> None:
        """Frame, encrypt and send ``packet``; a failed send closes the connection."""
        if packet.packet_id not in _SILENT_PACKETS:
            print(f"sending packet: 0x{packet.packet_id:02x}")

        body = ConnBuffer()
        body.push_varint(packet.packet_id)
        packet.push(body, self)

        frame = ConnBuffer()
        frame.push_bytes(body.data, True)

        try:
            self._sock.sendall(self.encrypt(frame.data))
        except OSError as exc:
            print("error sending packet: ", exc)
            try:
                self.stop()
            except OSError as stop_error:
                print("error stopping connection: ", stop_error)