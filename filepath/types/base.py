"""Base constants for path values."""

from __future__ import annotations

#: The single structural character. Parsing strips it as a delimiter and
#: rendering emits it after every directory segment.
SEPARATOR = "/"
