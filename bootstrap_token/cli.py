"""
Check a bootstrap token and print its public parts.

The token is taken from the first argument, or from BOOTSTRAP_TOKEN. A .env
file in the working directory is loaded first; variables already set in the
environment win. The secret is never printed.

Usage:
    bootstrap-token-check abcdef.0123456789abcdef
    BOOTSTRAP_TOKEN=abcdef.0123456789abcdef bootstrap-token-check
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from bootstrap_token.codec import TokenError, parse_token

TOKEN_ENV_VAR = "BOOTSTRAP_TOKEN"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    load_dotenv(Path.cwd() / ".env")

    raw = args[0] if args else os.environ.get(TOKEN_ENV_VAR)
    if not raw:
        print(f"usage: bootstrap-token-check TOKEN (or set {TOKEN_ENV_VAR})", file=sys.stderr)
        return 2

    try:
        token = parse_token(raw)
    except TokenError as e:
        print(f"Invalid bootstrap token: {e}", file=sys.stderr)
        return 1

    print(f"Token ID: {token.id}")
    print(f"Token secret: {len(token.secret)} characters (redacted)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
