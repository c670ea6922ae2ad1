from __future__ import annotations

import pytest

from host_selector.data.catalog import DEFAULT_URLS, candidates_from_urls, load_url_list, parse_target
from host_selector.exceptions import ConfigValidationError


def test_parse_target_extracts_hostname():
    assert parse_target("https://www.example.com/path?q=1") == "www.example.com"
    assert parse_target("http://[::1]:8080/") == "::1"


@pytest.mark.parametrize("url", ["not a url", "https://", "www.example.com", "http://host:notaport/"])
def test_parse_target_rejects_malformed(url):
    assert parse_target(url) is None


def test_candidates_from_urls_discards_malformed(caplog):
    with caplog.at_level("WARNING"):
        candidates = candidates_from_urls(["https://a.example", "bogus", "http://b.example/x"])

    assert [c.label for c in candidates] == ["https://a.example", "http://b.example/x"]
    assert [c.target for c in candidates] == ["a.example", "b.example"]
    assert all(c.latency is None for c in candidates)
    assert any("malformed" in r.message for r in caplog.records)


def test_default_urls_all_parse():
    assert len(candidates_from_urls(DEFAULT_URLS)) == len(DEFAULT_URLS)


def test_load_url_list_text(tmp_path):
    path = tmp_path / "hosts.txt"
    path.write_text("# mirrors\nhttps://a.example\n\n  https://b.example  \n")
    assert load_url_list(path) == ["https://a.example", "https://b.example"]


def test_load_url_list_yaml(tmp_path):
    path = tmp_path / "hosts.yaml"
    path.write_text("- https://a.example\n- https://b.example\n")
    assert load_url_list(path) == ["https://a.example", "https://b.example"]


def test_load_url_list_rejects_mapping(tmp_path):
    path = tmp_path / "hosts.json"
    path.write_text('{"url": "https://a.example"}')
    with pytest.raises(ConfigValidationError):
        load_url_list(path)


def test_load_url_list_missing(tmp_path):
    with pytest.raises(ConfigValidationError):
        load_url_list(tmp_path / "nope.txt")
