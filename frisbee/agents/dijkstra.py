"""DijkstraAgent: cost-bounded best-first expansion with a shaped heuristic.

Despite the name this is not a shortest-path search. Starting from every
immediate candidate intent, the agent expands sequences of intents on
cloned engines, rewards getting closer to the disc (and, overwhelmingly,
catching it), records one `SearchNode` per simulated step and finally
plays the first intent of the cheapest best-scoring node.
"""
from collections.abc import Sequence
from dataclasses import dataclass
import logging

from pydantic import Field, TypeAdapter
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .core import Agent, AgentType
from ..consts import SEARCH_COST_BOUND, SEARCH_MAX_DEPTH, SEARCH_MAX_NODES
from ..engine import GameEngine, distance_to_disc, holds_disc, intents_for
from ..intents import Intent, dash_candidates, move_candidates
from ..typings import PlayerSide, ThrowDirection

logger = logging.getLogger(__name__)


@pydantic_dataclass(frozen=True)
class DijkstraEvaluationConfig:
  # 靠近飞盘的奖励
  approach_score: int = 1000
  # 远离飞盘的惩罚
  retreat_score: int = -100
  # 距离不变的惩罚
  stall_score: int = -50
  # 接住飞盘时强制使用的分数
  catch_score: int = 100000
  # 搜索树内部各投掷方向的奖励
  throw_scores: dict[ThrowDirection, int] = Field(default_factory=lambda: {
      ThrowDirection.UP: 3000,
      ThrowDirection.LIGHT_UP: 4000,
      ThrowDirection.MIDDLE: 2000,
      ThrowDirection.LIGHT_DOWN: 4000,
      ThrowDirection.DOWN: 3000,
  })
  # 根节点各投掷方向的奖励
  root_throw_scores: dict[ThrowDirection, int] = Field(default_factory=lambda: {
      ThrowDirection.UP: 30,
      ThrowDirection.LIGHT_UP: 40,
      ThrowDirection.MIDDLE: 20,
      ThrowDirection.LIGHT_DOWN: 40,
      ThrowDirection.DOWN: 30,
  })
  # 移动/冲刺的奖励
  move_score: int = 1
  # 路径代价
  move_cost: int = 1
  dash_cost: int = 4
  throw_cost: int = 1
  cost_bound: int = SEARCH_COST_BOUND
  # 搜索深度与节点数上限
  max_depth: int = Field(default=SEARCH_MAX_DEPTH, ge=0)
  max_nodes: int = Field(default=SEARCH_MAX_NODES, ge=1)


@dataclass
class SearchNode:
  """One simulated step of the search.

  `engine` is an independently owned snapshot, `first_intent` the root-level
  intent the path started with.
  """
  engine: GameEngine
  first_intent: Intent
  cost: int
  score: int


def get_best(nodes: Sequence[SearchNode]) -> list[SearchNode]:
  """Return every node whose score equals the maximum score in `nodes`."""
  if not nodes:
    return []
  max_score = max(node.score for node in nodes)
  return [node for node in nodes if node.score == max_score]


@dataclass
class _Pending:
  engine: GameEngine
  intent: Intent
  first_intent: Intent
  cost: int
  score: int
  depth: int


class DijkstraAgent(Agent):
  agent_type = AgentType.DIJKSTRA
  evaluation: DijkstraEvaluationConfig

  def __init__(self, *, evaluation: DijkstraEvaluationConfig | dict | None = None, seed: int | None = None,
               name: str | None = None, debug: bool = False):
    super().__init__(seed=seed, name=name, debug=debug)
    if evaluation is None:
      evaluation = DijkstraEvaluationConfig()
    elif isinstance(evaluation, dict):
      # e.g. straight from a TOML match file
      evaluation = DijkstraEvaluationConfig(**evaluation)
    self.evaluation = evaluation

  def heuristic(self, before: float, after: float, caught: bool) -> int:
    """Score one step from the distance to the disc before and after it."""
    cfg = self.evaluation
    if caught:
      return cfg.catch_score
    if after < before:
      return cfg.approach_score
    if after > before:
      return cfg.retreat_score
    return cfg.stall_score

  def _children(self, engine: GameEngine, side: PlayerSide, base: int) -> list[tuple[Intent, int, int]]:
    """Return (intent, score, cost increment) for every expansion of `engine`."""
    cfg = self.evaluation
    player_score = engine.player(side).score
    if holds_disc(engine, side):
      return [(Intent.throw(d), base + cfg.throw_scores[d] + player_score, cfg.throw_cost)
              for d in ThrowDirection]
    if engine.player(side).is_dashing:
      return []
    children = [(i, base + cfg.move_score + player_score, cfg.move_cost) for i in move_candidates()]
    children += [(i, base + cfg.move_score + player_score, cfg.dash_cost) for i in dash_candidates()]
    return children

  def _root_candidates(self, engine: GameEngine, side: PlayerSide) -> list[tuple[Intent, int]]:
    cfg = self.evaluation
    player_score = engine.player(side).score
    if holds_disc(engine, side):
      return [(Intent.throw(d), player_score + cfg.root_throw_scores[d]) for d in ThrowDirection]
    if engine.player(side).is_dashing:
      return []
    return [(i, player_score + cfg.move_score) for i in move_candidates() + dash_candidates()]

  def expand(self, side: PlayerSide, stack: list[_Pending], nodes: list[SearchNode], limit: int) -> int:
    """Drain `stack`, appending one node per simulated step to `nodes`.

    Children are pushed in reverse so nodes come out in the same order a
    recursive depth-first expansion would produce. At most `limit` nodes are
    appended; the number actually appended is returned.
    """
    cfg = self.evaluation
    added = 0
    while stack:
      if added >= limit:
        logger.debug("expansion stopped at its share of %d nodes with %d pending", limit, len(stack))
        break
      item = stack.pop()
      engine = item.engine
      if item.cost >= cfg.cost_bound or not engine.is_playing():
        continue

      before = distance_to_disc(engine, side)
      engine.step(intents_for(side, item.intent))
      after = distance_to_disc(engine, side)
      delta = self.heuristic(before, after, holds_disc(engine, side))

      nodes.append(SearchNode(engine=engine, first_intent=item.first_intent,
                              cost=item.cost, score=delta + item.score))
      added += 1

      if item.depth >= cfg.max_depth:
        continue
      children = self._children(engine, side, delta + item.score)
      for intent, score, step_cost in reversed(children):
        stack.append(_Pending(engine=engine.clone(), intent=intent, first_intent=item.first_intent,
                              cost=item.cost + step_cost, score=score, depth=item.depth + 1))
    return added

  def search(self, side: PlayerSide, engine: GameEngine) -> list[SearchNode]:
    """Run the full expansion from `engine` and return every recorded node.

    The baseline and one node per first move are always recorded. Whatever
    is left of `max_nodes` is split between the first moves, and a share one
    of them leaves unused rolls over to the ones after it.
    """
    candidates = self._root_candidates(engine, side)
    nodes: list[SearchNode] = [SearchNode(engine=engine.clone(), first_intent=Intent.none(), cost=-1,
                                          score=engine.player(side).score)]
    budget = max(0, self.evaluation.max_nodes - 1 - len(candidates))
    for k, (intent, score) in enumerate(candidates):
      nodes.append(SearchNode(engine=engine.clone(), first_intent=intent, cost=-1, score=score))
      share = budget // (len(candidates) - k)
      stack = [_Pending(engine=engine.clone(), intent=intent, first_intent=intent, cost=0, score=score, depth=0)]
      budget -= self.expand(side, stack, nodes, share)
    return nodes

  def select(self, best: Sequence[SearchNode]) -> SearchNode:
    """Pick the cheapest node among `best`.

    Equal-cost candidates replace the current pick on a fresh coin flip
    each, so later nodes are favoured over a uniform choice.
    """
    pick = best[0]
    for node in best:
      if node.cost < pick.cost:
        pick = node
      if node.cost == pick.cost and self.rng.random() < 0.5:
        pick = node
    return pick

  def act(self, side: PlayerSide, engine: GameEngine) -> Intent:
    nodes = self.search(side, engine)
    best = get_best(nodes)
    pick = self.select(best)
    self._log_decision(side, pick.first_intent, nodes=len(nodes), best=len(best),
                       score=pick.score, cost=pick.cost)
    return pick.first_intent

  def _metadata(self) -> dict:
    return {
        "evaluation": self.evaluation.__class__.__name__,
        "evaluation_config": TypeAdapter(DijkstraEvaluationConfig).dump_python(self.evaluation, mode="json"),
    }


__all__ = ["DijkstraAgent", "DijkstraEvaluationConfig", "SearchNode", "get_best"]
