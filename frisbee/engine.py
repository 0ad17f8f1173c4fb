"""The game-engine contract consumed by the agents.

Physics, rendering and input capture live outside this package. Agents only
see the narrow stepping/inspection surface described by `GameEngine`; any
object providing it (the real game, a replay, a test double) can be driven.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from .intents import HumanIntent, Intent
from .typings import PlayerSide, Vector2


@dataclass(frozen=True)
class PlayerView:
  """Read-only snapshot of one player as exposed by the engine."""
  side: PlayerSide
  pos: Vector2
  score: int = 0
  is_dashing: bool = False


@dataclass(frozen=True)
class DiscView:
  """Read-only snapshot of the disc. `held_by` is None while in flight or loose."""
  pos: Vector2
  held_by: PlayerSide | None = None


@runtime_checkable
class GameEngine(Protocol):
  explo_rate: float
  # state hash -> (left, right) action values; a `QValues` or any plain mapping
  q_values: Mapping[int, tuple[np.ndarray, np.ndarray]]

  def step(self, intents: tuple[Intent, Intent]) -> None:
    """Advance physics by one tick. `intents` is ordered (left, right)."""
    ...

  def advance_idle(self) -> None:
    """Advance one tick with both sides idle."""
    ...

  def clone(self) -> "GameEngine":
    """Return a deep, fully independent snapshot of this engine."""
    ...

  def is_playing(self) -> bool:
    ...

  def player(self, side: PlayerSide) -> PlayerView:
    ...

  @property
  def disc(self) -> DiscView:
    ...

  def state_hash(self) -> int:
    """Stable hash in `[0, MAX_STATE_HASHES)` used to index the value table."""
    ...

  def get_input(self, side: PlayerSide) -> HumanIntent:
    ...

  def set_input(self, side: PlayerSide, flags: HumanIntent) -> None:
    ...


def intents_for(side: PlayerSide, intent: Intent) -> tuple[Intent, Intent]:
  """Build the (left, right) intent pair with the other side idle."""
  if side == PlayerSide.LEFT:
    return (intent, Intent.none())
  return (Intent.none(), intent)


def holds_disc(engine: GameEngine, side: PlayerSide) -> bool:
  return engine.disc.held_by == side


def distance_to_disc(engine: GameEngine, side: PlayerSide) -> float:
  return (engine.disc.pos - engine.player(side).pos).length()


__all__ = ["GameEngine", "PlayerView", "DiscView", "intents_for", "holds_disc", "distance_to_disc"]
