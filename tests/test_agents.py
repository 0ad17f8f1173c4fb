import math
from collections import Counter

from frisbee.agents.human import HumanPlayerAgent
from frisbee.agents.random import RandomAgent
from frisbee.agents.rollout import RandomRolloutAgent, candidate_intents
from frisbee.intents import DashIntent, HumanIntent, Intent, IntentType, MoveIntent, ThrowIntent
from frisbee.simulation import simulate
from frisbee.typings import PlayerSide, ThrowDirection, Vector2

from _engine import KinematicEngine


def test_random_agent_holder_only_throws_or_waits():
  agent = RandomAgent(seed=123)
  engine = KinematicEngine(held_by=PlayerSide.LEFT)
  counts = Counter()
  for _ in range(4000):
    intent = agent.act(PlayerSide.LEFT, engine)
    assert intent.type in (IntentType.THROW, IntentType.NONE)
    counts[intent.type] += 1
  assert 0.2 < counts[IntentType.THROW] / 4000 < 0.3


def test_random_agent_without_disc_moves_dashes_or_waits():
  agent = RandomAgent(seed=7)
  engine = KinematicEngine()
  counts = Counter()
  n = 5000
  for _ in range(n):
    intent = agent.act(PlayerSide.RIGHT, engine)
    assert not isinstance(intent, ThrowIntent)
    if isinstance(intent, (MoveIntent, DashIntent)):
      assert math.isclose(intent.direction.length(), 1.0)
    counts[intent.type] += 1
  assert 0.45 < counts[IntentType.MOVE] / n < 0.55
  assert 0.07 < counts[IntentType.DASH] / n < 0.13
  assert 0.35 < counts[IntentType.NONE] / n < 0.45


def test_random_agent_is_deterministic_for_a_seed():
  engine = KinematicEngine()
  agent = RandomAgent(seed=1)
  agent.reset(seed=42)
  first = [agent.act(PlayerSide.LEFT, engine) for _ in range(20)]
  agent.reset(seed=42)
  second = [agent.act(PlayerSide.LEFT, engine) for _ in range(20)]
  assert first == second


def test_human_agent_reads_captured_input():
  engine = KinematicEngine(held_by=PlayerSide.RIGHT)
  agent = HumanPlayerAgent()
  engine.set_input(PlayerSide.RIGHT, HumanIntent.THROW | HumanIntent.UP | HumanIntent.LEFT)
  engine.set_input(PlayerSide.LEFT, HumanIntent.DOWN)
  assert agent.act(PlayerSide.RIGHT, engine) == Intent.throw(ThrowDirection.LIGHT_UP)
  assert agent.act(PlayerSide.LEFT, engine) == Intent.move(Vector2(0.0, -1.0))


def test_rollout_candidates():
  assert len(candidate_intents(KinematicEngine(held_by=PlayerSide.LEFT), PlayerSide.LEFT)) == 5
  assert len(candidate_intents(KinematicEngine(), PlayerSide.LEFT)) == 16
  assert candidate_intents(KinematicEngine(dashing=(True, False)), PlayerSide.LEFT) == []


def test_rollout_picks_first_best_throw():
  engine = KinematicEngine(left=Vector2(-1.0, 0.0), right=Vector2(5.0, 4.0), held_by=PlayerSide.LEFT)
  agent = RandomRolloutAgent(sim=2, frames=40, seed=0)
  intent = agent.act(PlayerSide.LEFT, engine)

  scored = [simulate(engine, PlayerSide.LEFT, c, 40) for c in candidate_intents(engine, PlayerSide.LEFT)]
  best_score = max(score for score, _ in scored)
  first_best = next(c for score, c in scored if score == best_score)
  assert best_score >= scored[0][0]
  assert intent == first_best
  assert isinstance(intent, ThrowIntent)


def test_rollout_ties_keep_first_candidate():
  # Nothing can score within two frames, so every candidate ties at 0.
  engine = KinematicEngine()
  agent = RandomRolloutAgent(sim=3, frames=2, seed=0)
  assert agent.act(PlayerSide.LEFT, engine) == Intent.move(Vector2(0.0, 1.0))


def test_rollout_returns_none_while_dashing_without_disc():
  engine = KinematicEngine(dashing=(False, True))
  agent = RandomRolloutAgent(sim=3, frames=10, seed=0)
  assert agent.act(PlayerSide.RIGHT, engine) == Intent.none()


def test_rollout_does_not_touch_live_engine():
  engine = KinematicEngine(left=Vector2(-1.0, 0.0), held_by=PlayerSide.LEFT)
  before = engine.snapshot()
  RandomRolloutAgent(sim=1, frames=15, seed=0).act(PlayerSide.LEFT, engine)
  assert engine.snapshot() == before


def test_rollout_rejects_negative_config():
  import pytest
  from pydantic import ValidationError

  with pytest.raises(ValidationError):
    RandomRolloutAgent(sim=-1)
