"""Shared test fixtures."""

from __future__ import annotations

import pytest

from unicodec.enums import Encoding

#: Texts covering every UTF-8 sequence length and both UTF-16 unit counts.
SAMPLE_TEXTS: tuple[str, ...] = (
    "",
    "plain ascii",
    "aà⟶♥♫",
    "è una ⛵ ┌─┐",
    "banana 🍌 and ⛵ 𝄞 \U0010ffff",
)


@pytest.fixture(params=list(Encoding), ids=lambda e: e.name)
def encoding(request: pytest.FixtureRequest) -> Encoding:
    """Each of the five encodings in turn."""
    return request.param


@pytest.fixture(params=SAMPLE_TEXTS, ids=lambda t: repr(t)[:24])
def text(request: pytest.FixtureRequest) -> str:
    return request.param
