from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from getpass import getpass

from kdf_mod import __version__
from kdf_mod.compute import DerivationRequest, compute_key
from kdf_mod.errors import KeyDerivationError
from kdf_mod.hashes import SUPPORTED_HASHES
from kdf_mod.schema import describe


def read_password(args: argparse.Namespace) -> str:
    if args.password_env:
        return os.environ.get(args.password_env, "")
    if args.password_stdin:
        return sys.stdin.readline().rstrip("\r\n")
    return getpass("Password: ")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pbkdf2key",
        description="Derive keys with PBKDF2-HMAC (SHA-1, SHA-256 or SHA-512).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log derivation details to stderr")
    sub = parser.add_subparsers(dest="cmd", required=True)

    der = sub.add_parser("derive", help="Derive a key from a password")
    der.add_argument("--hash", dest="hash_function", required=True, choices=SUPPORTED_HASHES,
                     help="Hash function used inside HMAC")
    der.add_argument("--salt", help="Base64 salt (default: 16 random bytes)")
    der.add_argument("--iterations", type=int, help="Iteration count (default: 100000)")
    der.add_argument("--key-length", type=int, help="Key length in bytes (default: digest size)")
    src = der.add_mutually_exclusive_group()
    src.add_argument("--password-stdin", action="store_true", help="Read the password from the first line of stdin")
    src.add_argument("--password-env", metavar="VAR", help="Read the password from environment variable VAR")
    der.add_argument("--json", action="store_true", help="Print the result as a JSON object")

    sub.add_parser("schema", help="Describe the key data source attributes")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.cmd == "schema":
        print(describe())
        return 0

    password = read_password(args)
    request = DerivationRequest(
        password=password,
        hash_function=args.hash_function,
        salt=args.salt,
        iterations=args.iterations,
        key_length=args.key_length,
    )
    try:
        result = compute_key(request)
    except KeyDerivationError as e:
        print(f"{e.summary}: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict()))
    else:
        print(f"salt: {result.salt}")
        print(f"key: {result.key}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
