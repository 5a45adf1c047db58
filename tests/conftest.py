"""
Rat and Warehouse Keepers - Test Configuration and Fixtures

Common fixtures and helpers for building games at each phase.
"""

import pytest

from src.engine.base import GameConfig, Position, Role
from src.engine.placement import PlacementEngine
from src.engine.state import GameState
from src.engine.turns import TurnEngine


# =============================================================================
# STANDARD OPENING
# =============================================================================

MOUSE_START = Position(0, 0)

KEEPER_HOMES: dict[Role, Position] = {
    Role.KEEPER1: Position(1, 1),
    Role.KEEPER2: Position(3, 3),
    Role.KEEPER3: Position(5, 5),
}

# Ten distinct storage-to-storage hops starting from MOUSE_START
MOUSE_ROUTE: list[Position] = [
    Position(0, 2),
    Position(0, 4),
    Position(0, 6),
    Position(0, 8),
    Position(2, 8),
    Position(2, 6),
    Position(2, 4),
    Position(2, 2),
    Position(2, 0),
    Position(4, 0),
]


def place_all(
    state: GameState,
    mouse: Position = MOUSE_START,
    keepers: tuple[Position, ...] = tuple(KEEPER_HOMES.values()),
) -> GameState:
    """Run the whole setup phase, failing the test on any rejection."""
    for pos in (mouse, *keepers):
        state, result = PlacementEngine.place_at(state, pos)
        assert result.is_success, result.message
    return state


def shuffle_keepers(state: GameState) -> GameState:
    """Have each keeper step between its home and the intersection below it."""
    for role, home in KEEPER_HOMES.items():
        current = state.keeper_position(role)
        dest = home.offset(0, 2) if current == home else home
        state, result = TurnEngine.keeper_action(state, dest)
        assert result.is_success, result.message
    return state


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def config() -> GameConfig:
    """Standard 9x9, ten-round configuration."""
    return GameConfig()


@pytest.fixture
def fresh_state(config: GameConfig) -> GameState:
    """Game waiting for the Mouse to be placed."""
    return GameState.new(config)


@pytest.fixture
def placed_state(fresh_state: GameState) -> GameState:
    """All pieces placed; waiting for the first round to start."""
    return place_all(fresh_state)


@pytest.fixture
def playing_state(placed_state: GameState) -> GameState:
    """Round 1, Mouse to move."""
    state, _ = TurnEngine.start_next_round(placed_state)
    return state
