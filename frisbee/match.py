"""Host-side helpers that drive agents against an engine.

`play_decision_cycle` is the one place agents and the live engine meet: it
asks each side for its intent, then steps the engine once with both.
"""
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
import tomllib

from pydantic import BaseModel, Field
from tqdm import tqdm

from .agents.core import Agent, AgentBuilder
from .engine import GameEngine
from .intents import Intent
from .typings import PlayerSide

logger = logging.getLogger(__name__)

DEFAULT_MAX_CYCLES = 3600


@dataclass
class MatchResult:
  scores: tuple[int, int]
  cycles: int
  intents: list[tuple[Intent, Intent]] = field(default_factory=list)
  agent_metadata: list[dict] = field(default_factory=list)

  @property
  def winner(self) -> PlayerSide | None:
    left, right = self.scores
    if left == right:
      return None
    return PlayerSide.LEFT if left > right else PlayerSide.RIGHT

  def to_dict(self) -> dict:
    return {
        "scores": list(self.scores),
        "cycles": self.cycles,
        "winner": self.winner.value if self.winner else None,
        "intents": [[left.to_dict(), right.to_dict()] for left, right in self.intents],
        "agents": self.agent_metadata,
    }


def play_decision_cycle(engine: GameEngine, agents: Sequence[Agent]) -> tuple[Intent, Intent]:
  """Ask both agents for an intent (left first) and step `engine` once."""
  if len(agents) != 2:
    raise ValueError(f"a decision cycle needs exactly two agents, got {len(agents)}")
  left = agents[0].act(PlayerSide.LEFT, engine)
  right = agents[1].act(PlayerSide.RIGHT, engine)
  engine.step((left, right))
  return left, right


def play_match(engine: GameEngine, agents: Sequence[Agent], max_cycles: int = DEFAULT_MAX_CYCLES,
               record_intents: bool = False) -> MatchResult:
  """Run decision cycles while the engine is playing, up to `max_cycles`."""
  intents: list[tuple[Intent, Intent]] = []
  cycles = 0
  while cycles < max_cycles and engine.is_playing():
    pair = play_decision_cycle(engine, agents)
    if record_intents:
      intents.append(pair)
    cycles += 1
  scores = (engine.player(PlayerSide.LEFT).score, engine.player(PlayerSide.RIGHT).score)
  logger.info("match finished after %d cycles, score %d-%d", cycles, scores[0], scores[1])
  return MatchResult(
      scores=scores,
      cycles=cycles,
      intents=intents,
      agent_metadata=[agent.metadata() for agent in agents],
  )


def run_matches(n: int, engine_factory: Callable[[int], GameEngine], agents: Sequence[Agent],
                max_cycles: int = DEFAULT_MAX_CYCLES, progress: bool = True) -> list[MatchResult]:
  """Play `n` independent matches, each on a fresh engine.

  `engine_factory` receives the match seed. Agents are reset before every
  match so results are reproducible for a given seed.
  """
  results: list[MatchResult] = []
  for i in tqdm(range(n), desc="Running matches", disable=not progress):
    seed = 1234 + i
    for offset, agent in enumerate(agents):
      agent.reset(seed=seed * 2 + offset)
    results.append(play_match(engine_factory(seed), agents, max_cycles=max_cycles))
  return results


def save_results(results: Sequence[MatchResult], output_file: str | Path) -> Path:
  """Append one JSON line per match to `output_file`."""
  path = Path(output_file)
  path.parent.mkdir(parents=True, exist_ok=True)
  with path.open("a", encoding="utf-8") as f:
    for r in results:
      f.write(json.dumps(r.to_dict()) + "\n")
  return path


def summarize(results: Sequence[MatchResult]) -> dict[str, float]:
  """Win rates per side and draw rate over `results`."""
  total = len(results)
  if total == 0:
    return {"left": 0.0, "right": 0.0, "draw": 0.0}
  wins = {PlayerSide.LEFT: 0, PlayerSide.RIGHT: 0}
  draws = 0
  for r in results:
    if r.winner is None:
      draws += 1
    else:
      wins[r.winner] += 1
  return {
      "left": wins[PlayerSide.LEFT] / total,
      "right": wins[PlayerSide.RIGHT] / total,
      "draw": draws / total,
  }


class MatchConfig(BaseModel):
  """Which agents play, and how many matches to run.

  Example TOML::

    n_matches = 10
    max_cycles = 2000

    [left]
    cls_name = "DijkstraAgent"

    [right]
    cls_name = "RandomRolloutAgent"
    kwargs = { sim = 1, frames = 20 }
  """

  left: AgentBuilder
  right: AgentBuilder
  n_matches: int = Field(default=1, ge=1)
  max_cycles: int = Field(default=DEFAULT_MAX_CYCLES, ge=1)

  @classmethod
  def load(cls, path: str | Path) -> 'MatchConfig':
    with Path(path).open('rb') as fh:
      data = tomllib.load(fh)
    return cls.model_validate(data)

  def build_agents(self) -> list[Agent]:
    return [self.left.build(), self.right.build()]

  def run(self, engine_factory: Callable[[int], GameEngine], progress: bool = True) -> list[MatchResult]:
    return run_matches(self.n_matches, engine_factory, self.build_agents(),
                       max_cycles=self.max_cycles, progress=progress)


__all__ = ["MatchResult", "MatchConfig", "play_decision_cycle", "play_match", "run_matches", "save_results", "summarize"]
