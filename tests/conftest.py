"""pytest conventional configuration file."""

from collections.abc import Callable, Iterator
from unittest import mock

import pytest
import requests

SOME_TABLE = """\
name,tag,code,status,description
identity,multihash,0x00,permanent,raw binary
sha2-256,multihash,0x12,permanent,SHA-256
aes-128,key,0x60,draft,
"""


def pytest_collection_modifyitems(
    session: pytest.Session, config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Block all external socket connections by default.

    Allows local socket connections.
    """
    for item in items:
        item.add_marker(pytest.mark.allow_hosts(["127.0.0.1", "::1"]))


@pytest.fixture
def mock_get() -> Iterator[mock.Mock]:
    """Fake the table download. Responds with `SOME_TABLE` by default."""
    with mock.patch("requests.get", autospec=True) as get:
        get.return_value = mock.Mock(spec=requests.Response, text=SOME_TABLE)
        yield get


@pytest.fixture
def serve_table(mock_get: mock.Mock) -> Callable[[str], mock.Mock]:
    """Fake the table download with the given CSV text."""

    def serve(text: str) -> mock.Mock:
        mock_get.return_value.text = text
        return mock_get

    return serve
