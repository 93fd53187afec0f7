"""Shared pytest fixtures for Bullpen tests."""

import pytest

from bullpen.config import EngineConfig, set_config
from bullpen.core.enums import (
    PlayerType,
    Position,
    WorkEthic,
)
from bullpen.core.models.city import Building, CityState
from bullpen.core.models.player import HiddenTraits, HitterTools, PitcherTools, Player
from bullpen.core.models.prospect import DraftProspect
from bullpen.core.progression import create_franchise
from bullpen.core.rng import SeededRandomSource


# =============================================================================
# Randomness and config
# =============================================================================


@pytest.fixture
def source() -> SeededRandomSource:
    """Seeded source so every test run draws the same numbers."""
    return SeededRandomSource(1234)


@pytest.fixture(autouse=True)
def reset_config():
    """Keep environment-derived config from leaking between tests."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def seeded_config() -> EngineConfig:
    config = EngineConfig(draft_class_size=50, seed=7)
    set_config(config)
    return config


# =============================================================================
# Player Fixtures
# =============================================================================


@pytest.fixture
def hitter() -> Player:
    """A 20-year-old shortstop with room to grow."""
    return Player(
        id="hitter-1",
        first_name="Eddie",
        last_name="Morales",
        age=20,
        position=Position.SS,
        player_type=PlayerType.HITTER,
        current_rating=45,
        potential=65,
        tools=HitterTools(hit=50, power=40, speed=55, arm=45, field=48),
        salary=15_000,
        contract_years=3,
    )


@pytest.fixture
def pitcher() -> Player:
    """A 24-year-old starter."""
    return Player(
        id="pitcher-1",
        first_name="Carl",
        last_name="Whitaker",
        age=24,
        position=Position.SP,
        player_type=PlayerType.PITCHER,
        current_rating=52,
        potential=60,
        tools=PitcherTools(stuff=58, control=47, movement=50),
        hidden_traits=HiddenTraits(work_ethic=WorkEthic.EXCELLENT),
        salary=20_000,
        contract_years=2,
    )


@pytest.fixture
def prospect() -> DraftProspect:
    return DraftProspect(
        id="prospect-1",
        first_name="Jake",
        last_name="Sullivan",
        age=19,
        position=Position.CF,
        player_type=PlayerType.HITTER,
        current_rating=42,
        potential=60,
        tools=HitterTools(hit=45, power=38, speed=60, arm=44, field=47),
        hidden_traits=HiddenTraits(injury_prone=True, coachability=62, clutch=41),
        year=1,
    )


@pytest.fixture
def prospects(source) -> list[DraftProspect]:
    """A small ranked class."""
    from bullpen.generators import generate_draft_class

    return generate_draft_class(60, 1, source)


# =============================================================================
# Franchise Fixtures
# =============================================================================


@pytest.fixture
def franchise():
    """Fresh Low-A franchise."""
    return create_franchise()


@pytest.fixture
def city() -> CityState:
    """Low-A city with an empty downtown."""
    return CityState(
        population=15_000,
        median_income=32_000,
        unemployment_rate=18,
        team_pride=50,
        national_recognition=5,
        buildings=[Building(id=i) for i in range(50)],
    )
