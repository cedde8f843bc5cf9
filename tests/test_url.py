import pytest

from webappmgr.url import Url


def test_full_url_parts():
    text = "http://user@example.com:8080/p/a?x=1#frag"
    url = Url(text)
    assert url.scheme == "http"
    assert url.host == "example.com"
    assert url.port == "8080"
    assert url.path == "/p/a"
    assert url.query == "?x=1"
    assert url.fragment == "#frag"
    assert url.to_string() == text
    assert str(url) == text


def test_url_without_path():
    url = Url("https://example.com")
    assert url.host == "example.com"
    assert url.path == ""
    assert url.port == ""
    assert url.to_string() == "https://example.com"


def test_query_without_path():
    url = Url("https://example.com?lang=en")
    assert url.host == "example.com"
    assert url.path == ""
    assert url.query == "?lang=en"
    assert url.to_string() == "https://example.com?lang=en"


def test_url_without_authority():
    url = Url("mailto:someone@example.com")
    assert url.scheme == "mailto"
    assert url.path == "someone@example.com"
    assert url.host == ""
    assert url.to_string() == "mailto:someone@example.com"


def test_empty_url():
    url = Url("")
    assert (url.scheme, url.host, url.port, url.path, url.query, url.fragment) == (
        "",
        "",
        "",
        "",
        "",
        "",
    )
    assert url.to_string() == ""
    assert not url.is_local_file()


def test_set_query_replaces_existing():
    url = Url("http://example.com/index.html?old=1#top")
    url.set_query([("a b", "c&d"), ("lang", "en")])
    assert url.query == "?a%20b=c%26d&lang=en"
    assert url.to_string() == "http://example.com/index.html?a%20b=c%26d&lang=en#top"


def test_set_query_keeps_unreserved_and_non_ascii():
    url = Url("http://example.com/")
    url.set_query({"name": "caf\u00e9-_.~"})
    assert url.query == "?name=caf\u00e9-_.~"


def test_set_query_empty_clears():
    url = Url("http://example.com/?x=1")
    url.set_query([])
    assert url.query == ""
    assert url.to_string() == "http://example.com/"


def test_local_file_round_trip():
    url = Url.from_local_file("/usr/palm/applications/bareapp/index.html")
    assert url.is_local_file()
    assert url.scheme == "file"
    assert url.to_local_file() == "/usr/palm/applications/bareapp/index.html"
    assert url.file_name() == "index.html"
    assert url.path == "/usr/palm/applications/bareapp/index.html"


def test_local_file_ignores_query_and_fragment():
    url = Url("file:///usr/share/page.html?x=1#top")
    assert url.to_local_file() == "/usr/share/page.html"
    assert url.query == "?x=1"
    assert url.fragment == "#top"


def test_from_relative_path_is_empty():
    url = Url.from_local_file("relative/index.html")
    assert url.to_string() == ""
    assert url.file_name() == ""


@pytest.mark.parametrize("text", ["http://example.com/a.html", "ftp://example.com/b"])
def test_file_name_of_remote_url_is_empty(text):
    url = Url(text)
    assert not url.is_local_file()
    assert url.file_name() == ""
    assert url.to_local_file() == ""