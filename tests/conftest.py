"""Shared fixtures for ProductBoard SDK tests."""

import pytest

from productboard_sdk import ProductBoardClient

SITE = "https://pb.test"


@pytest.fixture
def client():
    """Client pointed at a fake site; requests are mocked with respx."""
    with ProductBoardClient(
        site=SITE,
        default_headers={"Authorization": "Bearer test-token"},
    ) as client:
        yield client
