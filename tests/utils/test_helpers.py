"""Tests for blogcms/utils/helpers.py."""

from unittest.mock import MagicMock

import pytest

from blogcms.utils.helpers import host, slugify


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Hello World", "hello-world"),
        ("  Async -- Python!  ", "async-python"),
        ("Über café", "ber-caf"),
        ("!!!", ""),
    ],
)
def test_slugify(title: str, expected: str) -> None:
    assert slugify(title) == expected


def test_host() -> None:
    request = MagicMock()
    request.client.host = "10.1.2.3"
    assert host(request) == "10.1.2.3"

    request.client = None
    assert host(request) == "unknown"
