"""JSON pointer helpers used for error paths and source maps."""

from __future__ import annotations

from typing import Any, List


JsonPointer = str


def escape_token(token: Any) -> str:
    return str(token).replace("~", "~0").replace("/", "~1")


def unescape_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def join_path(base: JsonPointer, token: Any) -> JsonPointer:
    if not base:
        return f"/{escape_token(token)}"
    return f"{base}/{escape_token(token)}"


def prepend_token(token: Any, path: JsonPointer) -> JsonPointer:
    return f"/{escape_token(token)}{path}"


def split_path(path: JsonPointer) -> List[str]:
    """Split a pointer such as ``/users/0/name`` into unescaped tokens."""
    if not path:
        return []
    return [unescape_token(part) for part in path.split("/")[1:]]
