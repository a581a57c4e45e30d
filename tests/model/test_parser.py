"""Tests for parsing strings into path values."""

import pytest

from filepath.model.parser import parse
from filepath.model.path import ROOT, Directory, File


@pytest.mark.parametrize(
    "raw",
    ["/a/b/c/", "a/b/c/", "a/", "a", "/a", "/ /", "test1/test2/test3.txt"],
)
def test_canonical_strings_round_trip(raw):
    assert parse(raw).render() == raw


@pytest.mark.parametrize("raw", ["", "/", "//", "///"])
def test_empty_and_separator_only_collapse_to_root(raw):
    p = parse(raw)
    assert p == ROOT
    assert p.render() == "/"
    assert p.next is None


def test_single_segment_without_separator_is_file():
    p = parse("a")
    assert p == File("a")


def test_trailing_separator_makes_final_segment_directory():
    p = parse("a/")
    assert p == Directory("a", None)


def test_leading_separator_wraps_in_empty_directory():
    p = parse("/a")
    assert p == Directory("", File("a"))
    assert p.name == ""
    assert p.next.name == "a"


def test_relative_directory_chain():
    p = parse("a/b/c/")
    names = []
    node = p
    for _ in range(3):
        assert isinstance(node, Directory)
        names.append(node.name)
        node = node.next
    assert names == ["a", "b", "c"]
    assert node is None


def test_whitespace_segment_is_preserved():
    p = parse("/ /")
    assert isinstance(p, Directory)
    assert p.name == ""
    assert isinstance(p.next, Directory)
    assert p.next.name == " "
    assert p.next.next is None


def test_doubled_separators_are_dropped():
    p = parse("a//b///c")
    assert p == Directory("a", Directory("b", File("c")))
    assert p.render() == "a/b/c"


def test_leading_doubled_separator_adds_one_root():
    assert parse("//a/").render() == "/a/"
    assert parse("//a/").names() == ("", "a")


def test_segments_with_unusual_characters():
    p = parse("/my docs/\tnotes/a.b.c")
    assert p.names() == ("", "my docs", "\tnotes", "a.b.c")
    assert p.terminal == File("a.b.c")


@pytest.mark.parametrize(
    "path",
    [
        Directory("test1", Directory("test2", File("test3.txt"))),
        Directory("", Directory("a")),
        File("x"),
        ROOT,
    ],
)
def test_reparsing_canonical_output_is_stable(path):
    # Holds when only the head segment may have an empty name
    rendered = path.render()
    assert parse(rendered).render() == rendered


def test_parser_does_not_print(capsys):
    parse("")
    parse("//")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_interior_empty_segment_collapses_on_reparse():
    p = Directory("a", Directory("", File("b")))
    assert p.render() == "a//b"
    assert parse(p.render()).render() == "a/b"
