import pytest

from uriforge import ArgumentError, BoundsError, FormatError, Path


@pytest.mark.parametrize(
    "path", ["path1/path2/path3/file.ext", "/path1/path2/path3/file.ext", "file.ext", "/file.ext", "/", "a/b/", ""]
)
def test_forge_round_trip(path):
    assert str(Path.forge(path)) == path


def test_parse_segments():
    assert Path.parse("/a/b").segments == ["", "a", "b"]
    assert Path.parse("a/b").segments == ["a", "b"]
    assert Path.parse("").segments == []
    assert len(Path.parse("")) == 0


def test_parse_stops_at_query_and_fragment():
    assert Path.parse("/a/b?x=1").segments == ["", "a", "b"]
    assert Path.parse("a#frag").segments == ["a"]


def test_parse_accepts_pchar():
    path = Path.parse("/issn:1535-3613/~me/@home/a%20b")
    assert path.segments == ["", "issn:1535-3613", "~me", "@home", "a%20b"]


@pytest.mark.parametrize("bad", ["a b", "a//b", "//a", "a\\b", "<x>"])
def test_parse_rejects(bad):
    assert not Path.validate(bad)
    with pytest.raises(FormatError) as excinfo:
        Path.parse(bad)
    assert excinfo.value.component == "path"


def test_is_absolute():
    assert Path.parse("/a").is_absolute
    assert not Path.parse("a/b").is_absolute
    assert not Path().is_absolute


def test_forge_from_segments():
    assert str(Path.forge(["a", "b"])) == "a/b"
    assert str(Path.forge(["", "a"])) == "/a"


def test_forge_rejects_other_types():
    with pytest.raises(ArgumentError):
        Path.forge(42)
    with pytest.raises(ArgumentError):
        Path.forge(["a", 1])


def test_add_splits_sub_paths():
    injected = Path()
    injected.add("a/b")
    stepwise = Path()
    stepwise.add("a")
    stepwise.add("b")
    assert injected.segments == ["a", "b"]
    assert injected == stepwise


def test_add_sequence():
    path = Path.parse("/root")
    path.add(["x", "y/z"])
    assert path.segments == ["", "root", "x", "y", "z"]
    assert str(path) == "/root/x/y/z"


def test_get_and_set():
    path = Path.parse("a/b/c")
    assert path.get(1) == "b"
    assert path[-1] == "c"
    path.set(1, "B")
    path[2] = "C"
    assert str(path) == "a/B/C"


def test_set_rejects_bad_segments():
    path = Path.parse("a/b")
    with pytest.raises(ArgumentError):
        path.set(0, 1)
    with pytest.raises(ArgumentError):
        path.set(0, "x/y")
    with pytest.raises(BoundsError):
        path.set(5, "x")


def test_remove_reindexes():
    path = Path.parse("a/b/c")
    path.remove(1)
    assert path.segments == ["a", "c"]
    assert path[1] == "c"
    del path[0]
    assert list(path) == ["c"]


@pytest.mark.parametrize("index", [3, -4])
def test_missing_index(index):
    path = Path.parse("a/b/c")
    with pytest.raises(BoundsError):
        path.get(index)
    with pytest.raises(BoundsError):
        path.remove(index)
    with pytest.raises(IndexError):
        path[index]


def test_index_must_be_int():
    with pytest.raises(ArgumentError):
        Path.parse("a").get("0")


def test_segments_is_a_copy():
    path = Path.parse("a")
    path.segments.append("b")
    assert str(path) == "a"


@pytest.mark.parametrize(
    "start, added, expected",
    [
        ("/dir/", "file", "/dir/file"),
        ("/", "a", "/a"),
        ("a/b/", "c/d", "a/b/c/d"),
        ("a", "b//c", "a/b/c"),
        ("a", "", "a"),
        ("a", "/b", "a/b"),
        ("a", "b/", "a/b/"),
        ("", "/", "/"),
        ("", "/a", "/a"),
    ],
)
def test_add_keeps_path_parseable(start, added, expected):
    path = Path.parse(start)
    path.add(added)
    assert str(path) == expected
    assert Path.validate(str(path))
    assert Path.parse(str(path)) == path


def test_empty_interior_segments_collapse():
    path = Path(["a", "", "b"])
    assert path.segments == ["a", "b"]
    assert Path.validate(str(path))


def test_set_rejects_empty_interior_segment():
    path = Path.parse("a/b/c")
    with pytest.raises(ArgumentError):
        path.set(1, "")
    with pytest.raises(ArgumentError):
        path[-2] = ""
    path.set(0, "")
    path.set(-1, "")
    assert str(path) == "/b/"
    assert Path.validate(str(path))
