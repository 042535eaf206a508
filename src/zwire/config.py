"""Configuration for the ZObject codec and call templates.

This module provides the frozen configuration dataclass shared by the decoder
and the call-template helpers. Every function that reads configuration takes it
as an optional argument, so there is no process-wide mutable state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_ZID = re.compile(r"Z[1-9][0-9]*")


@dataclass(frozen=True)
class CodecConfig:
    """Tunables for decoding and template handling.

    Attributes:
        max_unwrap_depth: Maximum number of wrapper levels followed when
            resolving a sign or special marker to its terminal reference
            (default 8, minimum 2). Wire objects produced by the encoder need two.
            An object nested deeper than this is returned undecoded.
        label_language: ZID of the language used when reading labels of a
            function definition (default ``Z1002``, English).
        placeholder_prefix: Text that marks an unfilled template value
            (default ``<Provide``). Matching ignores case and leading spaces
            after ``<``.

    Examples:
        ```python
        from zwire import CodecConfig, decode

        # Accept deeply wrapped signs from a lenient producer
        config = CodecConfig(max_unwrap_depth=16)
        value = decode(wire_object, config=config)

        # German labels in call templates
        config = CodecConfig(label_language="Z1430")
        ```
    """

    max_unwrap_depth: int = 8
    label_language: str = "Z1002"
    placeholder_prefix: str = "<Provide"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.max_unwrap_depth, bool) or not isinstance(self.max_unwrap_depth, int):
            raise ValueError(
                f"max_unwrap_depth must be an integer, got {type(self.max_unwrap_depth).__name__}"
            )

        if self.max_unwrap_depth < 2:
            raise ValueError(f"max_unwrap_depth must be >= 2, got {self.max_unwrap_depth}")

        if not isinstance(self.label_language, str) or not _ZID.fullmatch(self.label_language):
            raise ValueError(f"label_language must be a ZID like 'Z1002', got {self.label_language!r}")

        prefix = self.placeholder_prefix
        if not isinstance(prefix, str) or not prefix.startswith("<") or len(prefix) < 2:
            raise ValueError(
                f"placeholder_prefix must start with '<' and name a word, "
                f"got {self.placeholder_prefix!r}"
            )


DEFAULT_CONFIG = CodecConfig()
