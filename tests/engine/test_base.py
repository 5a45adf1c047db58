"""
Rat and Warehouse Keepers - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import pytest

from src.engine.base import (
    TURN_ORDER,
    ActionResult,
    CellKind,
    GameConfig,
    Outcome,
    Phase,
    Position,
    Role,
)
from src.engine.validators import (
    validate_board_size,
    validate_coordinates,
    validate_max_turns,
)


class TestCellKind:
    """Tests for CellKind enum."""

    def test_values(self):
        assert CellKind.STORAGE.value == "storage"
        assert CellKind.ROAD.value == "road"


class TestRole:
    """Tests for Role enum."""

    def test_turn_order(self):
        assert TURN_ORDER == (Role.MOUSE, Role.KEEPER1, Role.KEEPER2, Role.KEEPER3)

    def test_keeper_index(self):
        assert Role.MOUSE.keeper_index is None
        assert Role.KEEPER1.keeper_index == 0
        assert Role.KEEPER2.keeper_index == 1
        assert Role.KEEPER3.keeper_index == 2

    def test_is_keeper(self):
        assert not Role.MOUSE.is_keeper
        assert all(role.is_keeper for role in TURN_ORDER[1:])

    def test_keeper_lookup(self):
        assert Role.keeper(0) is Role.KEEPER1
        assert Role.keeper(2) is Role.KEEPER3

    def test_keeper_lookup_out_of_range(self):
        with pytest.raises(ValueError, match="Keeper index must be 0-2"):
            Role.keeper(3)

    def test_labels(self):
        assert Role.MOUSE.label == "Mouse"
        assert Role.KEEPER2.label == "Keeper 2"


class TestPhase:
    def test_phase_values(self):
        assert {p.value for p in Phase} == {"setup", "playing", "round_transition", "ended"}


class TestOutcome:
    """Tests for Outcome enum."""

    def test_rejections(self):
        rejections = {o for o in Outcome if o.is_rejection}
        assert rejections == {
            Outcome.INVALID_PLACEMENT,
            Outcome.POSITION_OCCUPIED,
            Outcome.NOT_STORAGE,
            Outcome.NOT_INTERSECTION,
            Outcome.ILLEGAL_DISTANCE,
            Outcome.PATH_REVISIT,
            Outcome.ACTION_OUT_OF_PHASE,
            Outcome.OUT_OF_BOUNDS,
        }

    def test_successes_are_not_rejections(self):
        assert not Outcome.CAPTURED.is_rejection
        assert not Outcome.CHECKED_FOOTPRINT.is_rejection


class TestPosition:
    """Tests for Position dataclass."""

    def test_equality_and_hash(self):
        assert Position(1, 2) == Position(1, 2)
        assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2

    def test_offset(self):
        assert Position(3, 3).offset(-1, 1) == Position(2, 4)

    def test_as_tuple(self):
        assert Position(4, 6).as_tuple() == (4, 6)

    def test_str(self):
        assert str(Position(0, 8)) == "(0, 8)"

    def test_immutable(self):
        pos = Position(0, 0)
        with pytest.raises(AttributeError):
            pos.x = 1


class TestActionResult:
    """Tests for ActionResult dataclass."""

    def test_rejected_result(self):
        result = ActionResult(outcome=Outcome.PATH_REVISIT, role=Role.MOUSE)
        assert result.is_rejected
        assert not result.is_success
        assert not result.round_ended

    def test_success_result(self):
        result = ActionResult(outcome=Outcome.MOVED, role=Role.KEEPER3, round_ended=True)
        assert result.is_success
        assert result.round_ended

    def test_str_uses_message(self):
        assert str(ActionResult(outcome=Outcome.CHECKED_EMPTY, message="Nothing here.")) == "Nothing here."

    def test_str_without_message(self):
        assert str(ActionResult(outcome=Outcome.NOT_STORAGE)) == "Not storage"


class TestGameConfig:
    """Tests for GameConfig validation."""

    def test_defaults(self):
        config = GameConfig()
        assert config.board_size == 9
        assert config.max_turns == 10

    def test_custom(self):
        config = GameConfig(board_size=7, max_turns=3)
        assert config.board_size == 7
        assert config.max_turns == 3

    def test_even_board_rejected(self):
        with pytest.raises(ValueError, match="must be odd"):
            GameConfig(board_size=10)

    def test_tiny_board_rejected(self):
        with pytest.raises(ValueError, match="at least 5"):
            GameConfig(board_size=3)

    def test_zero_turns_rejected(self):
        with pytest.raises(ValueError, match="must be positive"):
            GameConfig(max_turns=0)


class TestValidators:
    """Tests for validation utilities."""

    def test_validate_board_size(self):
        assert validate_board_size(9) == 9

    def test_validate_board_size_type(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_board_size("9")
        with pytest.raises(ValueError, match="must be an integer"):
            validate_board_size(True)

    def test_validate_max_turns(self):
        assert validate_max_turns(1) == 1
        with pytest.raises(ValueError, match="must be an integer"):
            validate_max_turns(2.5)

    def test_validate_coordinates(self):
        assert validate_coordinates(0, 8, 9) == (0, 8)

    def test_validate_coordinates_off_board(self):
        with pytest.raises(ValueError, match="x=9 is off the board"):
            validate_coordinates(9, 0, 9)
        with pytest.raises(ValueError, match="y=-1 is off the board"):
            validate_coordinates(0, -1, 9)

    def test_validate_coordinates_type(self):
        with pytest.raises(ValueError, match="Coordinate x must be an integer, got str"):
            validate_coordinates("1", 1, 9)
