import math
import random
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Vector2:
  """Immutable 2D vector used for positions and directions."""
  x: float = 0.0
  y: float = 0.0

  @classmethod
  def zero(cls) -> 'Vector2':
    return cls(0.0, 0.0)

  def __add__(self, other: 'Vector2') -> 'Vector2':
    return Vector2(self.x + other.x, self.y + other.y)

  def __sub__(self, other: 'Vector2') -> 'Vector2':
    return Vector2(self.x - other.x, self.y - other.y)

  def __mul__(self, k: float) -> 'Vector2':
    return Vector2(self.x * k, self.y * k)

  __rmul__ = __mul__

  def __neg__(self) -> 'Vector2':
    return Vector2(-self.x, -self.y)

  def length(self) -> float:
    return math.hypot(self.x, self.y)

  def is_zero(self) -> bool:
    return self.x == 0.0 and self.y == 0.0

  def normalized(self) -> 'Vector2':
    """Return a unit vector in the same direction. The zero vector stays zero."""
    n = self.length()
    if n == 0.0:
      return Vector2.zero()
    return Vector2(self.x / n, self.y / n)

  def __str__(self) -> str:
    return f"({self.x:.2f}, {self.y:.2f})"


class PlayerSide(Enum):
  """Which half of the field a player defends."""
  LEFT = "left"
  RIGHT = "right"

  def __str__(self) -> str:
    return self.value

  @property
  def index(self) -> int:
    """Position of this side in per-side tuples (left first)."""
    return 0 if self == PlayerSide.LEFT else 1

  def opponent(self) -> 'PlayerSide':
    return PlayerSide.RIGHT if self == PlayerSide.LEFT else PlayerSide.LEFT


class ThrowDirection(Enum):
  """Vertical shape of a throw. Declaration order is the candidate order."""
  UP = "up"
  LIGHT_UP = "light_up"
  MIDDLE = "middle"
  LIGHT_DOWN = "light_down"
  DOWN = "down"

  def __str__(self) -> str:
    return self.value


def random_throw_direction(rng: random.Random) -> ThrowDirection:
  return rng.choice(list(ThrowDirection))


class StateOfGame(Enum):
  """Match lifecycle as reported by the engine.

  Only `PLAYING` is meaningful to the agents: lookahead stops as soon as a
  simulated state leaves it.
  """
  PLAYING = "playing"
  SCORED = "scored"
  FINISHED = "finished"


__all__ = ["Vector2", "PlayerSide", "ThrowDirection", "random_throw_direction", "StateOfGame"]
