"""Shared pytest fixtures for engine tests."""

from __future__ import annotations

from typing import List

import pytest
from fastapi.testclient import TestClient

from caddie_engine.app import create_app
from caddie_engine.rounds.models import HoleScore

# Front nine alternates par 4/3/5; back nine is all par 4.
ROUND_PARS = [4, 3, 5, 4, 3, 5, 4, 3, 5] + [4] * 9


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("REQUIRE_API_KEY", raising=False)
    monkeypatch.delenv("API_KEYS", raising=False)
    return TestClient(create_app())


@pytest.fixture
def under_par_card() -> List[HoleScore]:
    """18 holes: birdies on every front-nine par 3 and par 5, pars elsewhere."""

    holes = []
    for number, par in enumerate(ROUND_PARS, start=1):
        score = par - 1 if number <= 9 and par != 4 else par
        holes.append(HoleScore(hole=number, par=par, score=score, putts=2))
    return holes
