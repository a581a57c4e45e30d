"""Packaged JSON schemas for filepath documents."""
