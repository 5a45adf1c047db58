"""
Rat and Warehouse Keepers - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Any


MIN_BOARD_SIZE = 5


def validate_board_size(size: int) -> int:
    """
    Validate the board dimension.

    The board must be odd-sized so that its outer rows and columns are
    storage-bounded, and at least 5 wide so that every keeper can find
    its own intersection.

    Args:
        size: Width (and height) of the square board

    Returns:
        Validated size

    Raises:
        ValueError: If size is not an odd integer of at least 5
    """
    if not isinstance(size, int) or isinstance(size, bool):
        raise ValueError(f"Board size must be an integer, got {type(size).__name__}.")

    if size < MIN_BOARD_SIZE:
        raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}.")

    if size % 2 == 0:
        raise ValueError(f"Board size must be odd, got {size}.")

    return size


def validate_max_turns(turns: int) -> int:
    """
    Validate the number of rounds in a game.

    Raises:
        ValueError: If turns is not a positive integer
    """
    if not isinstance(turns, int) or isinstance(turns, bool):
        raise ValueError(f"Max turns must be an integer, got {type(turns).__name__}.")

    if turns < 1:
        raise ValueError(f"Max turns must be positive, got {turns}.")

    return turns


def validate_coordinates(x: Any, y: Any, board_size: int) -> tuple[int, int]:
    """
    Validate a coordinate pair submitted by the presentation layer.

    Args:
        x: Column index
        y: Row index
        board_size: Size of the board the coordinate refers to

    Returns:
        Validated (x, y) tuple

    Raises:
        ValueError: If either value is not an integer or lies off the board
    """
    for name, value in (("x", x), ("y", y)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Coordinate {name} must be an integer, got {type(value).__name__}.")
        if not (0 <= value < board_size):
            raise ValueError(
                f"Coordinate {name}={value} is off the board. Must be between 0 and {board_size - 1}."
            )

    return (x, y)
