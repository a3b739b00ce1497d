"""Game state and player movement rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from so_long.printf import printf
from so_long.validation import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, GameMap

MOVE_INTERVAL_MS = 100


class MoveOutcome(enum.Enum):
    """What happened when the player tried to move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    EXIT_LOCKED = "exit_locked"
    WON = "won"
    LOST = "lost"


class Direction(enum.Enum):
    """The four directions the player can step in, as ``(dx, dy)``."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass
class Game:
    """A running game on a validated map.

    In bonus mode enemies end the game on contact and the move counter is
    shown on screen instead of being printed after every move.
    """

    game_map: GameMap
    bonus: bool = False
    moves: int = 0
    finished: bool = False

    def _can_enter(self, x: int, y: int) -> bool:
        m = self.game_map
        if x < 0 or y < 0 or x >= m.width or y >= m.height:
            return False
        return m.tile(x, y) != WALL

    def move(self, dx: int, dy: int) -> MoveOutcome:
        """Try to move the player by ``(dx, dy)`` and report the outcome."""
        m = self.game_map
        new_x = m.player_x + dx
        new_y = m.player_y + dy
        if not self._can_enter(new_x, new_y):
            return MoveOutcome.BLOCKED
        target = m.tile(new_x, new_y)
        if self.bonus and target == ENEMY:
            printf("You lost! You touched an enemy!\n")
            self.finished = True
            return MoveOutcome.LOST
        outcome = MoveOutcome.MOVED
        if target == COLLECTIBLE:
            m.collected += 1
            m.set_tile(new_x, new_y, FLOOR)
            outcome = MoveOutcome.COLLECTED
        elif target == EXIT:
            if m.collected == m.collectibles:
                printf("You win! Moves: %d\n", self.moves + 1)
                self.finished = True
                return MoveOutcome.WON
            printf("Collect all collectibles before exiting!\n")
            return MoveOutcome.EXIT_LOCKED
        m.set_tile(m.player_x, m.player_y, FLOOR)
        m.player_x = new_x
        m.player_y = new_y
        m.set_tile(new_x, new_y, PLAYER)
        self.moves += 1
        if not self.bonus:
            printf("Moves: %d\n", self.moves)
        return outcome

    def step(self, direction: Direction) -> MoveOutcome:
        """Move the player one tile in ``direction``."""
        return self.move(direction.dx, direction.dy)

    def move_text(self) -> str:
        """Return the move counter as shown on screen."""
        return f"MOVES : {self.moves}"


@dataclass
class MoveThrottle:
    """Limits held-key movement to one step per interval.

    ``last_move_ms`` is updated by the caller whenever a step is taken.
    """

    interval_ms: int = MOVE_INTERVAL_MS
    last_move_ms: int = 0

    def ready(self, now_ms: int) -> bool:
        """Return whether enough time has passed since the last step."""
        return now_ms - self.last_move_ms >= self.interval_ms