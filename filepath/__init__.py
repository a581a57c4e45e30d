"""filepath: immutable filesystem-style path values.

A path is modelled as a chain of ``Directory`` segments that may end in a
``File``. Strings convert to values with ``parse`` and back with ``render``.

Primary API:
    parse() - Build a Path from a string
    Path, File, Directory - The path value model
    load_paths_yaml() - Load a YAML document listing paths

Example:
    from filepath import Directory, File, parse

    p = parse("/usr/local/bin/")
    assert p.render() == "/usr/local/bin/"
    assert Directory("etc", File("hosts")).render() == "etc/hosts"
"""

from __future__ import annotations

from filepath import cli, logging
from filepath._version import __version__
from filepath.dsl.loader import load_paths_yaml
from filepath.model.parser import parse
from filepath.model.path import ROOT, Directory, File, Path
from filepath.types.base import SEPARATOR

__all__ = [
    # Version
    "__version__",
    # Model
    "Path",
    "File",
    "Directory",
    "ROOT",
    "SEPARATOR",
    # Conversion
    "parse",
    "load_paths_yaml",
    # Utilities
    "cli",
    "logging",
]
