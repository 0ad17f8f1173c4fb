"""RandomAgent: baseline policy that only looks at possession."""
import math

from .core import Agent, AgentType
from ..engine import GameEngine, holds_disc
from ..intents import Intent
from ..typings import PlayerSide, Vector2, random_throw_direction

THROW_PROBABILITY = 0.25
MOVE_THRESHOLD = 0.5
DASH_THRESHOLD = 0.6


class RandomAgent(Agent):
  agent_type = AgentType.RANDOM

  def random_direction(self) -> Vector2:
    angle = self.rng.uniform(0.0, 2.0 * math.pi)
    return Vector2(math.cos(angle), math.sin(angle))

  def act(self, side: PlayerSide, engine: GameEngine) -> Intent:
    intent: Intent = Intent.none()
    if holds_disc(engine, side):
      if self.rng.random() < THROW_PROBABILITY:
        intent = Intent.throw(random_throw_direction(self.rng))
    else:
      r = self.rng.random()
      if r < MOVE_THRESHOLD:
        intent = Intent.move(self.random_direction())
      elif r < DASH_THRESHOLD:
        intent = Intent.dash(self.random_direction())
    self._log_decision(side, intent)
    return intent


__all__ = ["RandomAgent"]
