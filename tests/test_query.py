import pytest

from uriforge import ArgumentError, BoundsError, FormatError, Query


@pytest.mark.parametrize(
    "query",
    ["?myquery1=myvalue1&myquery2=myvalue2&myquery3=myvalue3", "?myquery1=myvalue1&myquery2=myvalue2&myquery3="],
)
def test_forge_round_trip(query):
    assert str(Query.forge(query)) == query


def test_missing_equals_becomes_empty_value():
    assert str(Query.forge("?myquery1=myvalue1&myquery2=myvalue2&myquery3")) == (
        "?myquery1=myvalue1&myquery2=myvalue2&myquery3="
    )
    query = Query.parse("a=&b")
    assert query.get() == {"a": "", "b": ""}
    assert query.build() == "?a=&b="


def test_reserved_characters_are_encoded_on_build():
    query = Query.forge("?myquery1=myva?lue1&myquery2=myvalue2&myquery3")
    assert query.get("myquery1", urlencode=False) == "myva?lue1"
    assert str(query) == "?myquery1=myva%3Flue1&myquery2=myvalue2&myquery3="


def test_set_decodes_and_build_encodes():
    query = Query.forge()
    query.set("my?query", "my%2Avalue")
    query.set("your%3Fquery", "your*value")
    assert str(query) == "?my%3Fquery=my%2Avalue&your%3Fquery=your%2Avalue"
    assert query.build(False) == "?my?query=my*value&your?query=your*value"


def test_parse_without_decoding():
    query = Query.parse("a%20b=c+d", urldecode=False)
    assert query.get() == {"a%20b": "c+d"}
    assert Query.parse("a%20b=c+d").get() == {"a b": "c d"}


def test_parse_splits_on_first_equals_only():
    assert Query.parse_as_dict("?k=v%3Dw") == {"k": "v=w"}


def test_last_assignment_wins_and_order_is_kept():
    query = Query.parse("b=1&a=2&b=3")
    assert list(query) == ["b", "a"]
    assert query.build() == "?b=3&a=2"


def test_empty():
    assert Query.parse("").build() == ""
    assert Query.parse("?").build() == ""
    assert len(Query()) == 0


def test_doubled_separators_are_skipped():
    assert Query.parse("a=1&&b=2").get() == {"a": "1", "b": "2"}


@pytest.mark.parametrize("bad", ["a=b=c", "a b", "a=<b>", "=v"])
def test_parse_rejects(bad):
    with pytest.raises(FormatError) as excinfo:
        Query.parse(bad)
    assert excinfo.value.component == "query"


def test_validate():
    assert Query.validate("?a=1&b=2")
    assert Query.validate("a=1#frag")
    assert not Query.validate("a b")


def test_set_arguments():
    query = Query()
    query.set("k", None)
    assert query.get("k") == ""
    with pytest.raises(ArgumentError):
        query.set("", "v")
    with pytest.raises(ArgumentError):
        query.set(1, "v")
    with pytest.raises(ArgumentError):
        query.set("k", 1)


def test_get():
    query = Query.parse("greeting=hello+world&x=1")
    assert query.get("greeting") == "hello+world"
    assert query.get("greeting", urlencode=False) == "hello world"
    pairs = query.get()
    pairs["x"] = "changed"
    assert query["x"] == "1"


def test_get_looks_up_encoded_keys():
    query = Query()
    query.set("a b", "c", urldecode=False)
    assert query.get("a+b") == "c"
    assert query.get("a%20b") == "c"


def test_missing_key():
    query = Query.parse("a=1")
    with pytest.raises(BoundsError):
        query.get("b")
    with pytest.raises(BoundsError):
        query.remove("b")
    with pytest.raises(KeyError):
        query["b"]


def test_has_and_remove():
    query = Query.parse("a=1&b=2")
    assert query.has("a")
    assert "b" in query
    query.remove("a")
    del query["b"]
    assert not query.has("a")
    assert query.build() == ""


def test_mapping_protocol():
    query = Query()
    query["a b"] = "c&d"
    assert query["a b"] == "c&d"
    assert str(query) == "?a+b=c%26d"


def test_load_replaces_pairs():
    query = Query.parse("a=1")
    query.load({"b": "2", "c": None})
    assert query.get() == {"b": "2", "c": ""}
    query.load([("d", "4")])
    assert query.get() == {"d": "4"}


def test_forge_from_mapping_is_not_decoded():
    assert Query.forge({"a%20b": "c"}).get() == {"a%20b": "c"}


def test_forge_rejects_other_types():
    with pytest.raises(ArgumentError):
        Query.forge(42)


def test_encode_decode_round_trip():
    original = Query({"sp ace": "a&b=c", "slash/": "?#%", "tilde~": "üñí"})
    assert Query.parse(original.build()) == original
    assert Query.parse(Query.parse(original.build()).build()) == original


@pytest.mark.parametrize("pairs", [["ab"], ["abc"], [("a", "b", "c")], [["a", "b"]], "ab", 42])
def test_load_rejects_malformed_pairs(pairs):
    with pytest.raises(ArgumentError):
        Query(pairs)


def test_failed_load_keeps_existing_pairs():
    query = Query.parse("a=1")
    with pytest.raises(ArgumentError):
        query.load([("b", "2"), "c"])
    assert query.get() == {"a": "1"}
