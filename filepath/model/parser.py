"""String-to-path conversion.

``parse`` is total: every string maps to a ``Path``. Degenerate input is
resolved by a fixed policy instead of being rejected:

- ``""`` and separator-only strings become the root ``Directory("", None)``.
- Leading, trailing, and doubled separators produce no empty segments.
- A trailing separator makes the final segment a directory, otherwise a file.
- A leading separator wraps the result in one empty-named directory, except
  for the root case above where it is not consulted.
"""

from __future__ import annotations

from filepath.model.path import ROOT, Directory, File, Path
from filepath.types.base import SEPARATOR


def parse(raw: str) -> Path:
    """Build a path value from its string form.

    Args:
        raw: Path string using ``/`` as the separator.

    Returns:
        The parsed path. ``parse(raw).render()`` equals ``raw`` for canonical
        input.

    Examples:
        >>> parse("/a").render()
        '/a'
        >>> parse("a/b/c/").names()
        ('a', 'b', 'c')
        >>> parse("//").render()
        '/'
    """
    ends_in_file = not raw.endswith(SEPARATOR)
    is_absolute = raw.startswith(SEPARATOR)

    tokens = [token for token in raw.split(SEPARATOR) if token]
    if not tokens:
        return ROOT

    last = tokens.pop()
    current: Path = File(last) if ends_in_file else Directory(last, None)

    while tokens:
        current = Directory(tokens.pop(), current)

    if is_absolute:
        current = Directory("", current)

    return current
