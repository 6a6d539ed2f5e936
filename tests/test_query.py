import pytest
from queryparams import Query, parse_uri_params


def test_query_from_str():
    query = Query("location=minneapolis&category=red")
    assert query == "location=minneapolis&category=red"
    assert query.params() == {"location": "minneapolis", "category": "red"}


def test_query_empty():
    assert Query() == ""
    assert Query().params() == {}


def test_query_from_mapping():
    query = Query({"k1": "v1", "k2": "v2"})
    assert query == "k1=v1&k2=v2"
    assert query.params() == {"k1": "v1", "k2": "v2"}


def test_query_from_pairs():
    query = Query([("a", "1"), ("a", "2")])
    assert query == "a=1&a=2"
    assert query.params() == {"a": "2"}


def test_query_key_without_value():
    query = Query({"a": "1", "flag": None})
    assert query == "a=1&flag"
    assert query.params() == {"a": "1"}


def test_query_from_bytes():
    with pytest.raises(TypeError):
        Query(b"a=1")


def test_query_repr():
    assert repr(Query("a=1")) == "Query('a=1')"


def test_uri_params():
    uri = "http://example.com/search?location=minneapolis&category=red"
    assert parse_uri_params(uri) == {"location": "minneapolis", "category": "red"}


def test_uri_params_with_fragment():
    assert parse_uri_params("http://example.com/path?q=1#section") == {"q": "1"}


def test_uri_params_no_query():
    assert parse_uri_params("http://example.com/path") == {}
    assert parse_uri_params("http://example.com/path?") == {}


def test_uri_params_relative():
    assert parse_uri_params("?a=1&a=2") == {"a": "2"}


def test_uri_params_not_decoded():
    assert parse_uri_params("http://example.com/?name=a%20b") == {"name": "a%20b"}


def test_query_reserved_characters_stay_encoded():
    query = Query({"a b": "c&d"})
    assert query == "a%20b=c%26d"
    assert query.params() == {"a%20b": "c%26d"}
