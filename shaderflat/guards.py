"""Include-guard synthesis for files that declare ``#pragma once``.

The flattened text already honours once-only semantics; the guard keeps the
output safe when a downstream tool includes it again.
"""

import hashlib
import re

NON_IDENTIFIER_RE = re.compile(r"[^A-Za-z0-9]+")

DEFAULT_PREFIX = "INCLUDE_GUARD_"
# Macro preprocessors cap identifier length.
DEFAULT_MAX_LENGTH = 128
HASH_DIGEST_SIZE = 8


def path_hash(path: str) -> str:
    """Fixed-width hex digest of ``path``, stable across interpreter runs."""
    return hashlib.blake2b(path.encode("utf-8"), digest_size=HASH_DIGEST_SIZE).hexdigest()


def guard_name(
    path: str,
    prefix: str = DEFAULT_PREFIX,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    safe = NON_IDENTIFIER_RE.sub("_", path).strip("_")
    safe = safe[:max_length].rstrip("_")
    digest = path_hash(path)
    if not safe:
        return f"{prefix}{digest}"
    return f"{prefix}{safe}_{digest}"


def wrap_in_guard(text: str, name: str) -> str:
    if text and not text.endswith("\n"):
        text += "\n"
    return f"#ifndef {name}\n#define {name}\n{text}#endif // {name}\n"
