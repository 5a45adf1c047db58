"""
Rat and Warehouse Keepers - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects are immutable (frozen dataclasses) so that
engine calls can share them freely between states.
"""

from dataclasses import dataclass
from enum import Enum, auto

from src.engine.validators import validate_board_size, validate_max_turns


BOARD_SIZE = 9
MAX_TURNS = 10
KEEPER_COUNT = 3


class CellKind(Enum):
    """Kind of a board cell."""
    STORAGE = "storage"
    ROAD = "road"


class Role(Enum):
    """Pieces that take turns, in play order."""
    MOUSE = "mouse"
    KEEPER1 = "keeper1"
    KEEPER2 = "keeper2"
    KEEPER3 = "keeper3"

    @property
    def is_keeper(self) -> bool:
        return self is not Role.MOUSE

    @property
    def keeper_index(self) -> int | None:
        """0-based slot in the keeper position array, None for the Mouse."""
        return _KEEPER_INDEX.get(self)

    @classmethod
    def keeper(cls, index: int) -> "Role":
        """Return the keeper role for a 0-based slot."""
        if not (0 <= index < KEEPER_COUNT):
            raise ValueError(f"Keeper index must be 0-{KEEPER_COUNT - 1}, got {index}")
        return TURN_ORDER[index + 1]

    @property
    def label(self) -> str:
        if self is Role.MOUSE:
            return "Mouse"
        return f"Keeper {self.keeper_index + 1}"


TURN_ORDER: tuple[Role, ...] = (Role.MOUSE, Role.KEEPER1, Role.KEEPER2, Role.KEEPER3)

_KEEPER_INDEX: dict[Role, int] = {
    Role.KEEPER1: 0,
    Role.KEEPER2: 1,
    Role.KEEPER3: 2,
}


class Phase(Enum):
    """Game state machine phases."""
    SETUP = "setup"
    PLAYING = "playing"
    ROUND_TRANSITION = "round_transition"
    ENDED = "ended"


class Winner(Enum):
    """Which side won a finished game."""
    KEEPERS = "keepers"
    MOUSE = "mouse"


class FootprintMarker(Enum):
    """How a discovered footprint is highlighted."""
    ORIGIN = auto()       # Mouse's placement cell
    FIFTH_STEP = auto()   # fifth cell on the Mouse's path
    TRACE = auto()


class Outcome(Enum):
    """Result kinds reported for every submitted input."""
    # Rejections
    INVALID_PLACEMENT = auto()
    POSITION_OCCUPIED = auto()
    NOT_STORAGE = auto()
    NOT_INTERSECTION = auto()
    ILLEGAL_DISTANCE = auto()
    PATH_REVISIT = auto()
    ACTION_OUT_OF_PHASE = auto()
    OUT_OF_BOUNDS = auto()
    # Successes
    PLACED = auto()
    PLACEMENT_COMPLETE = auto()
    MOVED = auto()
    CHECKED_EMPTY = auto()
    CHECKED_FOOTPRINT = auto()
    CAPTURED = auto()
    ROUND_STARTED = auto()
    GAME_ENDED = auto()
    RESET = auto()

    @property
    def is_rejection(self) -> bool:
        return self in _REJECTIONS


_REJECTIONS = frozenset({
    Outcome.INVALID_PLACEMENT,
    Outcome.POSITION_OCCUPIED,
    Outcome.NOT_STORAGE,
    Outcome.NOT_INTERSECTION,
    Outcome.ILLEGAL_DISTANCE,
    Outcome.PATH_REVISIT,
    Outcome.ACTION_OUT_OF_PHASE,
    Outcome.OUT_OF_BOUNDS,
})


@dataclass(frozen=True, order=True)
class Position:
    """
    A board coordinate.

    Attributes:
        x: Column index
        y: Row index
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of a single input handled by an engine.

    Attributes:
        outcome: What happened (success descriptor or rejection kind)
        role: Role that acted, if any
        position: Target coordinate of the action, if any
        round_ended: Whether this action closed the current round
        message: Human-readable description for the presentation layer
    """
    outcome: Outcome
    role: Role | None = None
    position: Position | None = None
    round_ended: bool = False
    message: str = ""

    @property
    def is_rejected(self) -> bool:
        return self.outcome.is_rejection

    @property
    def is_success(self) -> bool:
        return not self.outcome.is_rejection

    def __str__(self) -> str:
        if self.message:
            return self.message
        return self.outcome.name.replace("_", " ").capitalize()


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        board_size: Width and height of the square board
        max_turns: Rounds the Mouse must survive to win
    """
    board_size: int = BOARD_SIZE
    max_turns: int = MAX_TURNS

    def __post_init__(self) -> None:
        """Validate configuration."""
        validate_board_size(self.board_size)
        validate_max_turns(self.max_turns)
