"""RandomRolloutAgent: scores every candidate intent by simulating it."""
from pydantic.dataclasses import dataclass as pydantic_dataclass
from pydantic import Field

from .core import Agent, AgentType
from ..consts import DEFAULT_ROLLOUT_FRAMES, DEFAULT_ROLLOUT_SIM
from ..engine import GameEngine, holds_disc
from ..intents import Intent, dash_candidates, move_candidates, throw_candidates
from ..simulation import simulate
from ..typings import PlayerSide


@pydantic_dataclass(frozen=True)
class RolloutConfig:
  # 每个候选动作的重复模拟次数
  sim: int = Field(default=DEFAULT_ROLLOUT_SIM, ge=0)
  # 每次模拟的空闲推进帧数
  frames: int = Field(default=DEFAULT_ROLLOUT_FRAMES, ge=0)


def candidate_intents(engine: GameEngine, side: PlayerSide) -> list[Intent]:
  """Intents worth simulating for `side`.

  The holder may only throw. Movement is ignored while the player is
  mid-dash, so nothing is returned then.
  """
  if holds_disc(engine, side):
    return throw_candidates()
  if engine.player(side).is_dashing:
    return []
  return move_candidates() + dash_candidates()


class RandomRolloutAgent(Agent):
  agent_type = AgentType.RANDOM_ROLLOUT
  config: RolloutConfig

  def __init__(self, *, sim: int = DEFAULT_ROLLOUT_SIM, frames: int = DEFAULT_ROLLOUT_FRAMES,
               seed: int | None = None, name: str | None = None, debug: bool = False):
    super().__init__(seed=seed, name=name, debug=debug)
    self.config = RolloutConfig(sim=sim, frames=frames)

  @property
  def sim(self) -> int:
    return self.config.sim

  @property
  def frames(self) -> int:
    return self.config.frames

  def act(self, side: PlayerSide, engine: GameEngine) -> Intent:
    best: tuple[int, Intent] | None = None
    evaluated = 0
    for _ in range(self.sim):
      for candidate in candidate_intents(engine, side):
        score, intent = simulate(engine, side, candidate, self.frames)
        evaluated += 1
        # strictly greater: the first candidate seen keeps ties
        if best is None or score > best[0]:
          best = (score, intent)

    intent = best[1] if best is not None else Intent.none()
    self._log_decision(side, intent, evaluated=evaluated, score=best[0] if best else None)
    return intent

  def _metadata(self) -> dict:
    return {"sim": self.sim, "frames": self.frames}


__all__ = ["RandomRolloutAgent", "RolloutConfig", "candidate_intents"]
