"""Parser settings."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

MAX_DEPTH_ENV = "LOXPARSE_MAX_DEPTH"

# Each nesting level costs several Python frames (one per grammar rule), so
# the default keeps well clear of the interpreter's recursion limit.
DEFAULT_MAX_DEPTH = 64


@dataclass(frozen=True)
class ParserConfig:
    """
    Settings shared by every parse.

    Attributes:
        max_depth: Maximum nesting of groupings and unary operators.
            None disables the limit.
        filename: Filename attached to tokens scanned by parse_string.
    """
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    filename: str = "<string>"

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be positive or None, got {self.max_depth}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ParserConfig":
        """
        Build a config from LOXPARSE_MAX_DEPTH.

        "0" or "none" disables the depth limit. Keyword overrides win over
        the environment.
        """
        if environ is None:
            environ = os.environ

        settings = {}
        raw = environ.get(MAX_DEPTH_ENV)
        if raw is not None:
            settings["max_depth"] = parse_max_depth(raw)

        settings.update(overrides)
        return cls(**settings)


def parse_max_depth(raw: str) -> Optional[int]:
    """Parse a max-depth setting; "0" and "none" mean unlimited."""
    text = raw.strip().lower()
    if text in ("", "none", "0"):
        return None
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"invalid max depth: {raw!r}") from None
    if value < 0:
        raise ValueError(f"invalid max depth: {raw!r}")
    return value
