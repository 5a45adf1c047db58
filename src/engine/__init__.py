"""
Rat and Warehouse Keepers Game Engine.

Pure Python game logic with zero UI dependencies.
Handles board topology, piece placement, turn order, moves, checks
and win/loss detection.
"""

from src.engine.base import (
    BOARD_SIZE,
    KEEPER_COUNT,
    MAX_TURNS,
    TURN_ORDER,
    ActionResult,
    CellKind,
    FootprintMarker,
    GameConfig,
    Outcome,
    Phase,
    Position,
    Role,
    Winner,
)
from src.engine.board import Board, is_diagonal_neighbor, is_orthogonal_hop
from src.engine.placement import PlacementEngine
from src.engine.state import GameState
from src.engine.turns import TurnEngine

__all__ = [
    # Constants
    "BOARD_SIZE",
    "KEEPER_COUNT",
    "MAX_TURNS",
    "TURN_ORDER",
    # Data Classes
    "ActionResult",
    "Board",
    "GameConfig",
    "GameState",
    "Position",
    # Enums
    "CellKind",
    "FootprintMarker",
    "Outcome",
    "Phase",
    "Role",
    "Winner",
    # Rules
    "is_diagonal_neighbor",
    "is_orthogonal_hop",
    # Engines
    "PlacementEngine",
    "TurnEngine",
]
