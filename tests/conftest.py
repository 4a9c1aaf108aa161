from __future__ import annotations

import pytest

from matchfeed import facade


@pytest.fixture(autouse=True)
def _reset_facade():
    facade.reset()
    yield
    facade.reset()
