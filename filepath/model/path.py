"""Immutable, recursively-structured representation of a filesystem-style path.

A ``Path`` is either a terminal ``File`` or a ``Directory`` that may own one
further ``Path`` as its continuation. Both variants are frozen dataclasses, so
values are hashable, compare structurally, and cannot be mutated after
construction.
Equality, hashing and ``repr`` walk the chain in a loop, as rendering does,
so very long chains stay within the interpreter recursion limit.

Rendering follows a single rule: a file contributes its name, a directory
contributes its name followed by the separator. ``Directory("", None)`` is the
canonical root and renders as ``"/"``.

Example:
    >>> p = Directory("test1", Directory("test2", File("test3.txt")))
    >>> p.render()
    'test1/test2/test3.txt'
    >>> p.next.name
    'test2'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from filepath.types.base import SEPARATOR


class Path(ABC):
    """Common interface of ``File`` and ``Directory``.

    Attributes:
        name: Segment name of this node. May be empty (root or doubled
            separator) or contain whitespace.
        next: Continuation of the chain, or ``None`` when this node is last.
    """

    name: str
    next: Optional[Path]

    @abstractmethod
    def _rendered_segment(self) -> str:
        """Return the text this single node contributes to ``render()``."""

    @classmethod
    def from_str(cls, raw: str) -> Path:
        """Build a path from its string form.

        Args:
            raw: Any string. Never rejected; see ``filepath.model.parser.parse``.

        Returns:
            The parsed path value.
        """
        from filepath.model.parser import parse

        return parse(raw)

    def render(self) -> str:
        """Return the canonical string form of the path.

        Directories always carry a trailing separator and files never do.
        """
        return "".join(node._rendered_segment() for node in self.segments())

    def __str__(self) -> str:
        return self.render()

    def _key(self) -> Tuple[Tuple[str, str], ...]:
        return tuple((type(node).__name__, node.name) for node in self.segments())

    def __eq__(self, other: Any) -> bool:
        """Compare variant and name of every node along both chains."""
        if not isinstance(other, Path):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        text = "None"
        for node in reversed(list(self.segments())):
            if isinstance(node, File):
                text = f"File(name={node.name!r})"
            else:
                text = f"Directory(name={node.name!r}, next={text})"
        return text

    def segments(self) -> Iterator[Path]:
        """Iterate over the nodes of the chain, head first.

        Yields:
            Each node, starting with ``self`` and following ``next``.
        """
        node: Optional[Path] = self
        while node is not None:
            yield node
            node = node.next

    def names(self) -> Tuple[str, ...]:
        """Return the segment names along the chain, head first."""
        return tuple(node.name for node in self.segments())

    def __len__(self) -> int:
        return sum(1 for _ in self.segments())

    @property
    def depth(self) -> int:
        """Number of nodes in the chain (always at least 1)."""
        return len(self)

    @property
    def terminal(self) -> Path:
        """Return the last node of the chain."""
        node = self
        while node.next is not None:
            node = node.next
        return node

    @property
    def is_file(self) -> bool:
        return isinstance(self, File)

    @property
    def is_directory(self) -> bool:
        return isinstance(self, Directory)

    @property
    def is_absolute(self) -> bool:
        """True when the path renders with a leading separator."""
        return isinstance(self, Directory) and self.name == ""

    @property
    def ends_in_file(self) -> bool:
        return isinstance(self.terminal, File)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a nested mapping suitable for JSON or YAML.

        Returns:
            ``{"file": name}`` for a file, or
            ``{"directory": name, "next": <mapping or None>}`` for a directory.
        """
        result: Optional[Dict[str, Any]] = None
        for node in reversed(list(self.segments())):
            if isinstance(node, File):
                result = {"file": node.name}
            else:
                result = {"directory": node.name, "next": result}
        assert result is not None
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Path:
        """Construct a path from a mapping produced by ``to_dict()``.

        Args:
            data: Nested mapping with exactly one of ``file`` or ``directory``
                per level.

        Returns:
            Path

        Raises:
            ValueError: If any level is not a mapping, names neither or both
                variants, has a non-string name, attaches ``next`` to a file, or
                refers back to an enclosing level.
        """
        chain: List[Tuple[str, str]] = []
        seen: Set[int] = set()
        current: Any = data
        while current is not None:
            if id(current) in seen:
                raise ValueError("Path entry refers back to itself")
            seen.add(id(current))
            if not isinstance(current, Mapping):
                raise ValueError(
                    f"Path entry must be a mapping, got {type(current).__name__}"
                )
            kinds = [k for k in ("file", "directory") if k in current]
            if len(kinds) != 1:
                raise ValueError(
                    "Path entry must have exactly one of 'file' or 'directory'"
                )
            kind = kinds[0]
            name = current[kind]
            if not isinstance(name, str):
                raise ValueError(
                    f"Path '{kind}' name must be a string, got {type(name).__name__}"
                )
            chain.append((kind, name))
            if kind == "file":
                if current.get("next") is not None:
                    raise ValueError(f"File '{name}' cannot have a 'next' entry")
                current = None
            else:
                current = current.get("next")

        result: Optional[Path] = None
        for kind, name in reversed(chain):
            result = File(name) if kind == "file" else Directory(name, result)
        assert result is not None
        return result


@dataclass(frozen=True, eq=False, repr=False)
class File(Path):
    """Terminal leaf of a path.

    Attributes:
        name: File name, including any extension.
    """

    name: str

    @property
    def next(self) -> None:  # type: ignore[override]
        """Files never continue; always ``None``."""
        return None

    @property
    def suffix(self) -> str:
        """Extension including its leading dot, or ``""`` when there is none.

        A dot at the start of the name (``.bashrc``) or at its end (``notes.``)
        does not begin a suffix.
        """
        idx = self.name.rfind(".")
        if 0 < idx < len(self.name) - 1:
            return self.name[idx:]
        return ""

    @property
    def stem(self) -> str:
        """File name without ``suffix``."""
        suffix = self.suffix
        return self.name[: -len(suffix)] if suffix else self.name

    def _rendered_segment(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False, repr=False)
class Directory(Path):
    """Path segment that may continue into a nested path.

    Attributes:
        name: Directory name; ``""`` marks the root.
        next: Owned continuation, or ``None`` when this directory is last.
    """

    name: str
    next: Optional[Path] = None

    def _rendered_segment(self) -> str:
        return self.name + SEPARATOR


#: Canonical root value, produced for empty and separator-only input.
ROOT = Directory("", None)
