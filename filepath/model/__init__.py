"""Path value model: variants and string parsing."""

from filepath.model.parser import parse
from filepath.model.path import ROOT, Directory, File, Path

__all__ = ["Path", "File", "Directory", "ROOT", "parse"]
