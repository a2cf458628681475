import base64
import io
import json

import pytest

import main

ZERO_SALT = base64.b64encode(bytes(16)).decode()
KAT_KEY = base64.b64encode(
    bytes.fromhex("1fefe125ab13dd2c06db86711ec448e9490e6c73024d7d8d659126c6f9fadd68")
).decode()


def test_derive_from_env(monkeypatch, capsys):
    monkeypatch.setenv("KDF_PW", "password")
    rc = main.main([
        "derive", "--hash", "sha256", "--salt", ZERO_SALT,
        "--iterations", "1", "--password-env", "KDF_PW",
    ])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out == [f"salt: {ZERO_SALT}", f"key: {KAT_KEY}"]


def test_derive_json_prompt(monkeypatch, capsys):
    monkeypatch.setattr(main, "getpass", lambda prompt: "password")
    rc = main.main([
        "derive", "--hash", "sha256", "--salt", ZERO_SALT,
        "--iterations", "1", "--key-length", "32", "--json",
    ])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"salt": ZERO_SALT, "key": KAT_KEY}


def test_derive_stdin_generates_salt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pw\n"))
    rc = main.main(["derive", "--hash", "sha1", "--iterations", "1", "--password-stdin", "--json"])
    result = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert len(base64.b64decode(result["salt"])) == 16
    assert len(base64.b64decode(result["key"])) == 20


def test_empty_password(monkeypatch, capsys):
    monkeypatch.setattr(main, "getpass", lambda prompt: "")
    rc = main.main(["derive", "--hash", "sha256", "--salt", "***"])
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert captured.err == "PBKDF2 Error: password is required\n"


def test_bad_salt(monkeypatch, capsys):
    monkeypatch.setattr(main, "getpass", lambda prompt: "pw")
    rc = main.main(["derive", "--hash", "sha256", "--salt", "***"])
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert captured.err.startswith("PBKDF2 Error: error decoding salt")


def test_unknown_hash_is_usage_error(capsys):
    with pytest.raises(SystemExit) as e:
        main.main(["derive", "--hash", "md5"])
    assert e.value.code == 2


def test_schema(capsys):
    assert main.main(["schema"]) == 0
    out = capsys.readouterr().out
    assert "password (required, sensitive)" in out
    assert "key (computed)" in out
