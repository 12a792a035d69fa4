import logging

import pytest

from proplink import Container


@pytest.fixture
def container():
    yield Container(prefix="Hello", count=0)


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="proplink")
    yield caplog
