"""Turning raw URL lists into candidates."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Optional
from urllib.parse import urlsplit

import yaml

from host_selector.exceptions import ConfigValidationError
from host_selector.models.candidate import Candidate
from host_selector.utils.logging import get_logger

log = get_logger(__name__, component="catalog")

DEFAULT_URLS: tuple[str, ...] = (
    "https://www.baidu.com",
    "https://www.toutiao.com",
    "https://www.douyin.com",
    "https://weixin.qq.com",
    "https://juejin.cn",
    "https://www.qq.com",
    "http://www.google.com",
    "https://www.taobao.com",
    "https://bitizen.org",
    "https://www.aliyun.com",
)


def parse_target(url: str) -> Optional[str]:
    """Hostname of ``url``, or None when it has no usable host part."""

    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
        _ = parts.port  # malformed ports raise ValueError
    except ValueError:
        return None
    if not parts.scheme or not hostname:
        return None
    return hostname


def candidates_from_urls(urls: Iterable[str]) -> List[Candidate]:
    """Build candidates labelled by URL; unparseable entries are dropped."""

    candidates: List[Candidate] = []
    for url in urls:
        target = parse_target(url)
        if target is None:
            log.warning("discarding malformed url", extra={"label": url})
            continue
        candidates.append(Candidate(label=url, target=target))
    return candidates


def load_url_list(path: Path) -> List[str]:
    """Read URLs from a text file (one per line) or a JSON/YAML list."""

    if not path.exists():
        raise ConfigValidationError(f"URL list not found: {path}")
    suffix = path.suffix.lower()
    if suffix in {".json", ".yml", ".yaml"}:
        try:
            content = json.loads(path.read_text()) if suffix == ".json" else yaml.safe_load(path.read_text())
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigValidationError(f"Invalid URL list {path}: {exc}") from exc
        if not isinstance(content, list):
            raise ConfigValidationError(f"URL list must be a list: {path}")
        return [str(item) for item in content]

    urls = []
    for line in path.read_text().splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    return urls


__all__ = ["DEFAULT_URLS", "candidates_from_urls", "load_url_list", "parse_target"]
