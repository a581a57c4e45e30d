"""Document formats that describe collections of paths."""

from filepath.dsl.loader import load_paths_yaml

__all__ = ["load_paths_yaml"]
