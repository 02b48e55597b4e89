import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest
from cryptography.hazmat.primitives.serialization import load_der_public_key

from craftserve.auth import (
    SESSION_SERVER_URL,
    Auth,
    Prop,
    auth_url,
    decrypt,
    encrypt,
    get_bytes,
    get_text,
    minecraft_hash,
    new_crypt,
    parse_auth,
)


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/ok":
            status, body = 200, b"hello"
        else:
            status, body = 404, b"missing"
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server_url():
    server = HTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_new_crypt_is_stable():
    first = new_crypt()
    second = new_crypt()
    assert first == second


def test_public_key_is_1024_bit_der():
    _, public = new_crypt()
    assert load_der_public_key(public).key_size == 1024


def test_encrypt_decrypt_round_trip():
    data = bytes(range(16))
    ciphertext = encrypt(data)
    assert ciphertext != data
    assert decrypt(ciphertext) == data


def test_decrypt_rejects_garbage():
    with pytest.raises(ValueError):
        decrypt(b"garbage")


@pytest.mark.parametrize(
    "name, expected",
    [
        (b"Notch", "4ed1f46bbe04bc756bcb17c0c7ce3e4632f06a48"),
        (b"jeb_", "-7c9d5b0044c130109a5d7b5fb5c317c02b4e28c1"),
        (b"simon", "88e16a1019277b15d58faf0541e11910eb756f6"),
    ],
)
def test_minecraft_hash_known_values(name, expected):
    assert minecraft_hash(name, b"") == expected


def test_minecraft_hash_concatenates_secret_and_public():
    assert minecraft_hash(b"ab", b"cd") == minecraft_hash(b"abcd", b"")
    assert minecraft_hash(b"ab", b"cd") != minecraft_hash(b"cd", b"ab")


def test_auth_url_layout():
    url = auth_url("steve", "-abc")
    assert url == SESSION_SERVER_URL + "?username=steve&serverId=-abc"


def test_parse_auth_full():
    data = (
        b'{"id": "abc", "name": "steve", "properties": ['
        b'{"name": "textures", "value": "v", "signature": "s"},'
        b'{"name": "other", "value": "w"}]}'
    )
    auth = parse_auth(data)
    assert auth == Auth(
        uuid="abc",
        name="steve",
        properties=[Prop("textures", "v", "s"), Prop("other", "w", None)],
    )


def test_parse_auth_missing_fields():
    assert parse_auth(b"{}") == Auth()


def test_parse_auth_rejects_invalid_json():
    with pytest.raises(ValueError):
        parse_auth(b"")


def test_parse_auth_rejects_non_object():
    with pytest.raises(ValueError):
        parse_auth(b"[]")


def test_get_bytes_and_text(server_url):
    assert get_bytes(server_url + "/ok") == b"hello"
    assert get_text(server_url + "/ok") == "hello"


def test_get_bytes_returns_body_on_error_status(server_url):
    assert get_bytes(server_url + "/nope") == b"missing"