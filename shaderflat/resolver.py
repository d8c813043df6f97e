"""Map an include operand such as ``"lib/noise.glsl"`` or ``<common/math.glsl>``
to the canonical path used for loading, cycle detection and deduplication.
"""

import posixpath
from pathlib import PurePosixPath
from typing import Optional

DELIMITERS = {'"': '"', "<": ">"}


def split_operand(operand: str) -> tuple[str, str]:
    """Return ``(opening_delimiter, name)`` for a delimited operand."""
    if len(operand) < 3:
        raise ValueError(f"Malformed include operand: {operand!r}")
    opener, closer = operand[0], operand[-1]
    if DELIMITERS.get(opener) != closer:
        raise ValueError(f"Malformed include operand: {operand!r}")
    return opener, operand[1:-1]


def resolve_include(
    operand: str,
    includer: Optional[str] = None,
    relative_to_includer: bool = False,
) -> str:
    """Resolve ``operand`` (delimiters included) to a canonical path string.

    Quoted names stay relative to the working directory of the run; bracketed
    names are rooted at ``/``. With ``relative_to_includer`` set, quoted names
    are resolved against the directory of ``includer`` instead.
    """
    opener, name = split_operand(operand)
    if opener == "<":
        # ".." cannot climb above the root.
        return posixpath.normpath("/" + name.lstrip("/"))

    if relative_to_includer and includer is not None:
        parent = posixpath.dirname(includer)
        return posixpath.normpath(posixpath.join(parent, name))
    return str(PurePosixPath(name))
