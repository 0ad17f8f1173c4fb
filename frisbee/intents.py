"""Intents and the discrete action codec.

An `Intent` is what an agent asks its player to do for one decision cycle.
Human input and the learned policy both work on `HumanIntent` flags; the
17 canonical flag combinations form the action space indexed by the value
table.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import TYPE_CHECKING

from .consts import ACTION_COUNT
from .typings import PlayerSide, ThrowDirection, Vector2

if TYPE_CHECKING:
  from .engine import GameEngine


class IntentType(Enum):
  NONE = "none"
  MOVE = "move"
  DASH = "dash"
  THROW = "throw"

  def __str__(self) -> str:
    return self.value


@dataclass(frozen=True)
class Intent(ABC):
  """Base value object for the four intent variants."""
  type: IntentType

  @classmethod
  def none(cls) -> 'NoneIntent':
    return NoneIntent(IntentType.NONE)

  @classmethod
  def move(cls, direction: Vector2) -> 'MoveIntent':
    return MoveIntent(IntentType.MOVE, direction)

  @classmethod
  def dash(cls, direction: Vector2) -> 'DashIntent':
    return DashIntent(IntentType.DASH, direction)

  @classmethod
  def throw(cls, direction: ThrowDirection) -> 'ThrowIntent':
    return ThrowIntent(IntentType.THROW, direction)

  @abstractmethod
  def to_dict(self) -> dict:
    """Return a JSON-serializable dict representation of this Intent."""

  @classmethod
  def deserialize(cls, d: dict) -> 'Intent':
    itype = IntentType(d.get('type'))
    if itype == IntentType.NONE:
      return cls.none()
    if itype == IntentType.MOVE:
      return cls.move(Vector2(*d['direction']))
    if itype == IntentType.DASH:
      return cls.dash(Vector2(*d['direction']))
    if itype == IntentType.THROW:
      return cls.throw(ThrowDirection(d['direction']))
    raise ValueError(f"Unknown intent type for deserialization: {d.get('type')}")


@dataclass(frozen=True)
class NoneIntent(Intent):
  def to_dict(self) -> dict:
    return {'type': self.type.value}

  def __str__(self) -> str:
    return "Intent.None()"


@dataclass(frozen=True)
class MoveIntent(Intent):
  direction: Vector2

  def to_dict(self) -> dict:
    return {'type': self.type.value, 'direction': [self.direction.x, self.direction.y]}

  def __str__(self) -> str:
    return f"Intent.Move{self.direction}"


@dataclass(frozen=True)
class DashIntent(Intent):
  direction: Vector2

  def to_dict(self) -> dict:
    return {'type': self.type.value, 'direction': [self.direction.x, self.direction.y]}

  def __str__(self) -> str:
    return f"Intent.Dash{self.direction}"


@dataclass(frozen=True)
class ThrowIntent(Intent):
  direction: ThrowDirection

  def to_dict(self) -> dict:
    return {'type': self.type.value, 'direction': self.direction.value}

  def __str__(self) -> str:
    return f"Intent.Throw({self.direction})"


class HumanIntent(IntFlag):
  """Directional input flags as captured from a controller."""
  IDLE = 0
  UP = 1
  DOWN = 2
  LEFT = 4
  RIGHT = 8
  THROW = 16


_H = HumanIntent
# Canonical action table. Position in the tuple is the action index.
ACTION_TABLE: tuple[HumanIntent, ...] = (
  _H.IDLE,
  _H.UP,
  _H.DOWN,
  _H.LEFT,
  _H.RIGHT,
  _H.UP | _H.LEFT,
  _H.UP | _H.RIGHT,
  _H.DOWN | _H.LEFT,
  _H.DOWN | _H.RIGHT,
  _H.THROW | _H.UP,
  _H.THROW | _H.DOWN,
  _H.THROW | _H.LEFT,
  _H.THROW | _H.RIGHT,
  _H.THROW | _H.UP | _H.LEFT,
  _H.THROW | _H.UP | _H.RIGHT,
  _H.THROW | _H.DOWN | _H.LEFT,
  _H.THROW | _H.DOWN | _H.RIGHT,
)
_INDEX_BY_FLAGS: dict[int, int] = {int(flags): i for i, flags in enumerate(ACTION_TABLE)}


def human_intent_to_index(flags: HumanIntent) -> int:
  """Return the action index of `flags`, or 0 for a non-canonical combination."""
  return _INDEX_BY_FLAGS.get(int(flags), 0)


def human_intent_from_index(idx: int) -> HumanIntent:
  """Return the flags of action `idx`. Anything outside 1..16 is idle."""
  if 1 <= idx < ACTION_COUNT:
    return ACTION_TABLE[idx]
  return HumanIntent.IDLE


def _flags_direction(flags: HumanIntent) -> Vector2:
  x = 0.0
  y = 0.0
  if flags & HumanIntent.UP:
    y += 1.0
  if flags & HumanIntent.DOWN:
    y -= 1.0
  if flags & HumanIntent.LEFT:
    x -= 1.0
  if flags & HumanIntent.RIGHT:
    x += 1.0
  return Vector2(x, y).normalized()


def _throw_direction(flags: HumanIntent, side: PlayerSide) -> ThrowDirection:
  # The "light" variants need the horizontal flag that points at the
  # opponent's half, which depends on the acting side.
  toward_opponent = (
    (side == PlayerSide.LEFT and bool(flags & HumanIntent.RIGHT)) or
    (side == PlayerSide.RIGHT and bool(flags & HumanIntent.LEFT))
  )
  if flags & HumanIntent.UP:
    return ThrowDirection.LIGHT_UP if toward_opponent else ThrowDirection.UP
  if flags & HumanIntent.DOWN:
    return ThrowDirection.LIGHT_DOWN if toward_opponent else ThrowDirection.DOWN
  return ThrowDirection.MIDDLE


def human_intent_to_intent(engine: "GameEngine", flags: HumanIntent, side: PlayerSide) -> Intent:
  """Translate captured input flags into an Intent for `side`.

  A throw input while not holding the disc degrades to a dash in the
  pressed direction.
  """
  direction = _flags_direction(flags)
  if flags & HumanIntent.THROW:
    if engine.disc.held_by == side:
      return Intent.throw(_throw_direction(flags, side))
    return Intent.dash(direction)
  if direction.is_zero():
    return Intent.none()
  return Intent.move(direction)


_DIAGONAL = Vector2(1.0, 1.0).normalized().x
# Cardinal directions first, then the normalized diagonals.
MOVE_DIRECTIONS: tuple[Vector2, ...] = (
  Vector2(0.0, 1.0),
  Vector2(0.0, -1.0),
  Vector2(-1.0, 0.0),
  Vector2(1.0, 0.0),
  Vector2(-_DIAGONAL, -_DIAGONAL),
  Vector2(-_DIAGONAL, _DIAGONAL),
  Vector2(_DIAGONAL, -_DIAGONAL),
  Vector2(_DIAGONAL, _DIAGONAL),
)


def throw_candidates() -> list[Intent]:
  return [Intent.throw(d) for d in ThrowDirection]


def move_candidates() -> list[Intent]:
  return [Intent.move(d) for d in MOVE_DIRECTIONS]


def dash_candidates() -> list[Intent]:
  return [Intent.dash(d) for d in MOVE_DIRECTIONS]


__all__ = [
  "Intent", "IntentType", "NoneIntent", "MoveIntent", "DashIntent", "ThrowIntent",
  "HumanIntent", "ACTION_TABLE", "human_intent_to_index", "human_intent_from_index",
  "human_intent_to_intent", "MOVE_DIRECTIONS", "throw_candidates", "move_candidates",
  "dash_candidates",
]
