from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


# Upper bound on the number of vertices a Graph holds unless overridden.
MAX_VERTICES = _env_int("ADJGRAPH_MAX_VERTICES", 100)


@dataclass(frozen=True)
class DisplayOptions:
    """
    Strings used by Graph.display / Graph.display_all.

    Layout is cosmetic; only the row contents matter.
    """

    header: str = "Description\t\t\t\t\tFrom\tTo"
    error: str = "DISPLAY ERROR: No path exists"
    indent: str = "\t\t\t\t\t\t\t"
    sep: str = "\t\t"


DEFAULT_DISPLAY = DisplayOptions()
