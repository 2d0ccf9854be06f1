from __future__ import annotations

from typing import Iterator

import pytest

from app.Models import Model


@pytest.fixture(autouse=True)
def reguard_models() -> Iterator[None]:
    """Every test starts and ends with mass assignment protection on."""
    Model.reguard()
    yield
    Model.reguard()
