"""The play field: map parsing, placement rules, broken walls, cheat code and army stock."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Sequence

import pygame

from siegeengine.point import Point

MAP_WIDTH = 24
MAP_HEIGHT = 12
BLOCK_SIZE = 64
WALL_SIZE = 4
MAX_ARMY_AMOUNT = 6
ICE_ARMY_ID = 3

CHEAT_SEQUENCE: tuple[int, ...] = (
    pygame.K_UP,
    pygame.K_UP,
    pygame.K_DOWN,
    pygame.K_DOWN,
    pygame.K_LEFT,
    pygame.K_RIGHT,
    pygame.K_RETURN,
)


class TileType(Enum):
    """What occupies one tile of the map."""

    DIRT = "dirt"
    FLOOR = "floor"
    WALL = "wall"
    CANNON = "cannon"
    ENEMY2 = "enemy2"
    TRAP = "trap"
    OCCUPIED = "occupied"


_TILE_CODES = {
    "0": TileType.FLOOR,
    "1": TileType.WALL,
    "2": TileType.CANNON,
    "3": TileType.ENEMY2,
    "4": TileType.TRAP,
}

_BLOCKING = frozenset({TileType.WALL, TileType.CANNON, TileType.ENEMY2, TileType.TRAP})

_TOP_LEFT, _TOP_RIGHT, _BOTTOM_LEFT, _BOTTOM_RIGHT = range(WALL_SIZE)


class MapError(ValueError):
    """Raised when map data is malformed."""


class Side(IntEnum):
    """A side of the walled fortress."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


class TileMap:
    """A parsed map with the four corners of its fortress wall."""

    def __init__(self, tiles: list[list[TileType]], corners: Sequence[Point]) -> None:
        if len(corners) != WALL_SIZE:
            raise MapError("Corner size is wrong.")
        self.tiles = tiles
        self.height = len(tiles)
        self.width = len(tiles[0]) if tiles else 0
        self.corners: tuple[Point, ...] = tuple(corners)
        self.broken_walls: dict[Side, list[Point]] = {side: [] for side in Side}

    def __getitem__(self, xy: tuple[int, int]) -> TileType:
        x, y = xy
        return self.tiles[y][x]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        """Tell whether an army cannot be placed on the tile."""
        if not self._in_bounds(x, y):
            return True
        if self.tiles[y][x] in _BLOCKING:
            return True
        top_left = self.corners[_TOP_LEFT]
        top_right = self.corners[_TOP_RIGHT]
        bottom_left = self.corners[_BOTTOM_LEFT]
        return top_left.x <= x <= top_right.x and top_left.y <= y <= bottom_left.y

    def clear_tile(self, x: int, y: int) -> None:
        """Turn the tile into floor."""
        self.tiles[y][x] = TileType.FLOOR

    def wall_side(self, x: int, y: int) -> Side | None:
        """Return the side of the fortress the tile lies on, corners excluded."""
        tl, tr, bl, br = self.corners
        if y == tl.y and tl.x < x < tr.x:
            return Side.UP
        if y == bl.y and bl.x < x < br.x:
            return Side.DOWN
        if x == tl.x and tl.y < y < bl.y:
            return Side.LEFT
        if x == tr.x and tr.y < y < br.y:
            return Side.RIGHT
        return None

    def break_wall(self, x: int, y: int) -> Side | None:
        """Record a destroyed wall tile, turn it into floor and return its side."""
        side = self.wall_side(x, y)
        if side is not None:
            self.broken_walls[side].append(Point(x, y))
        self.clear_tile(x, y)
        return side


def parse_map(text: str, width: int = MAP_WIDTH, height: int = MAP_HEIGHT) -> TileMap:
    """Parse map text of digits 0-4; whitespace is ignored."""
    codes = "".join(text.split())
    try:
        cells = [_TILE_CODES[code] for code in codes]
    except KeyError as exc:
        raise MapError("Map data is corrupted.") from exc
    if len(cells) != width * height:
        raise MapError("Map data is corrupted.")

    tiles = [cells[row * width:(row + 1) * width] for row in range(height)]
    corners: list[Point] = []
    for i, row in enumerate(tiles):
        for j, tile in enumerate(row):
            if tile is TileType.WALL and j >= 2:
                if row[j - 2] is TileType.FLOOR and row[j - 1] is TileType.WALL:
                    corners.append(Point(j - 1, i))
            elif tile is TileType.FLOOR and 2 <= j <= width - 2:
                if row[j - 2] is TileType.WALL and row[j - 1] is TileType.WALL:
                    corners.append(Point(j - 1, i))
    if len(corners) != WALL_SIZE:
        raise MapError("Corner size is wrong.")
    return TileMap(tiles, corners)


class CheatCode:
    """Watches key presses for a secret sequence."""

    def __init__(self, sequence: Iterable[int] = CHEAT_SEQUENCE) -> None:
        self.sequence = tuple(sequence)
        if not self.sequence:
            raise ValueError("cheat sequence must not be empty")
        self._strokes: deque[int] = deque()

    @property
    def strokes(self) -> tuple[int, ...]:
        """The keys currently remembered."""
        return tuple(self._strokes)

    def press(self, key_code: int) -> bool:
        """Record a key; return True when the sequence has just been completed.

        Once the buffer is full, matching leading keys are consumed.
        """
        self._strokes.append(key_code)
        if len(self._strokes) > len(self.sequence):
            self._strokes.popleft()
        if len(self._strokes) != len(self.sequence):
            return False
        last = len(self.sequence) - 1
        for i, expected in enumerate(self.sequence):
            if self._strokes[0] != expected:
                break
            self._strokes.popleft()
            if i == last:
                return True
        return False


@dataclass
class ArmyStock:
    """How many armies of each kind remain to be deployed."""

    amounts: list[int] = field(default_factory=lambda: [0] * MAX_ARMY_AMOUNT)
    total: int = MAX_ARMY_AMOUNT

    def __post_init__(self) -> None:
        if len(self.amounts) > MAX_ARMY_AMOUNT:
            raise ValueError(f"at most {MAX_ARMY_AMOUNT} army kinds are supported")
        if not 0 <= self.total <= MAX_ARMY_AMOUNT:
            raise ValueError(f"total must be between 0 and {MAX_ARMY_AMOUNT}")
        self.amounts = list(self.amounts) + [0] * (MAX_ARMY_AMOUNT - len(self.amounts))

    def _check(self, army_id: int) -> None:
        if not 0 <= army_id < MAX_ARMY_AMOUNT:
            raise IndexError(f"army id out of range: {army_id}")

    def reduce(self, army_id: int) -> int:
        """Take one army of the kind and return how many remain."""
        self._check(army_id)
        self.amounts[army_id] -= 1
        return self.amounts[army_id]

    def amount(self, army_id: int) -> int:
        """Return how many armies of the kind remain."""
        self._check(army_id)
        return self.amounts[army_id]

    def set_amount(self, army_id: int, amount: int) -> None:
        """Set how many armies of the kind remain."""
        self._check(army_id)
        self.amounts[army_id] = amount

    def is_exhausted(self, deployed: object) -> bool:
        """Tell whether the player has lost: nothing left to deploy besides ice, nothing deployed."""
        if deployed:
            return False
        return all(
            amount <= 0
            for army_id, amount in enumerate(self.amounts[: self.total])
            if army_id != ICE_ARMY_ID
        )