import pytest

from third_party_summary.entities import etld1_of_url
from third_party_summary.errors import AttributionError, MalformedURL
from third_party_summary.utils.etld import etld1, host


def test_host_drops_default_port_and_lowercases():
    assert host("https://Static.A.com:443/x.js?v=1") == "static.a.com"
    assert host("http://a.com:80/") == "a.com"
    assert host("http://a.com:8080/") == "a.com:8080"
    assert host("http://[::1]:3000/") == "[::1]:3000"


def test_host_rejects_hostless_urls():
    with pytest.raises(MalformedURL):
        host("blob:https://a.com/uuid")
    with pytest.raises(AttributionError):
        host("/relative/path.js")


def test_etld1():
    assert etld1("https://a.b.example.co.uk/x") == "example.co.uk"
    assert etld1("static.doubleclick.net") == "doubleclick.net"
    assert etld1("cdn.a.com:8443") == "a.com"
    assert etld1("http://127.0.0.1:8000/") == "127.0.0.1"


def test_etld1_of_url_requires_a_host():
    assert etld1_of_url("https://cdn.example.co.uk:8443/x.js") == "example.co.uk"
    for bad in ("data:text/plain,hi", "not a url", "about:blank"):
        with pytest.raises(MalformedURL):
            etld1_of_url(bad)
