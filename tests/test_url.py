"""Tests for parse_url() / stringify_url()."""

from qs_core import ParsedUrl, ParseOptions, StringifyOptions, parse_url, stringify_url


# ---------------------------------------------------------------------------
# parse_url
# ---------------------------------------------------------------------------

def test_parse_url_split():
    assert parse_url("https://x.test/p?a=1") == ParsedUrl(url="https://x.test/p", query={"a": "1"})

def test_parse_url_without_query():
    assert parse_url("https://x.test/p") == ParsedUrl(url="https://x.test/p", query={})

def test_parse_url_empty_query():
    assert parse_url("https://x.test/p?").query == {}

def test_parse_url_fragment_without_query_kept_in_url():
    assert parse_url("https://x.test/p#top").url == "https://x.test/p#top"

def test_parse_url_fragment_after_query_stays_in_query():
    assert parse_url("https://x.test/p?a=1#top").query == {"a": "1#top"}

def test_parse_url_splits_on_first_question_mark():
    assert parse_url("https://x.test/p?a=1?b=2").query == {"a": "1?b=2"}

def test_parse_url_options():
    parsed = parse_url("/p?a=x,y", ParseOptions(array_format="comma"))
    assert parsed.query == {"a": ["x", "y"]}


# ---------------------------------------------------------------------------
# stringify_url
# ---------------------------------------------------------------------------

def test_stringify_url_empty_query():
    assert stringify_url({"url": "https://x.test/p", "query": {}}) == "https://x.test/p"

def test_stringify_url_missing_query():
    assert stringify_url({"url": "https://x.test/p"}) == "https://x.test/p"

def test_stringify_url_with_query():
    assert stringify_url({"url": "https://x.test/p", "query": {"a": "1", "b": "x y"}}) == (
        "https://x.test/p?a=1&b=x%20y"
    )

def test_stringify_url_query_all_skipped():
    assert stringify_url({"url": "/p", "query": {"a": None}}) == "/p"

def test_stringify_url_parsed_url():
    assert stringify_url(ParsedUrl("/p", {"a": ["1", "2"]})) == "/p?a=1&a=2"

def test_stringify_url_options():
    opts = StringifyOptions(array_format="bracket")
    assert stringify_url(ParsedUrl("/p", {"a": ["1", "2"]}), opts) == "/p?a[]=1&a[]=2"

def test_url_round_trip():
    url = "https://x.test/search?q=caf%C3%A9&page=2"
    assert stringify_url(parse_url(url)) == url
