"""Top-level package exports for the frisbee agents project.

Expose a small, stable API so callers can `from frisbee import Intent, DijkstraAgent`.
"""

from .typings import PlayerSide, ThrowDirection, Vector2, StateOfGame
from .intents import Intent, HumanIntent, human_intent_to_index, human_intent_from_index, human_intent_to_intent
from .engine import GameEngine
from .simulation import simulate
from .qvalues import QValues, get_blank_q_values
from .agents import (
  Agent, AgentBuilder, AgentType, HumanPlayerAgent, RandomAgent, RandomRolloutAgent,
  DijkstraAgent, TabularQLearningAgent,
)

__all__ = [
  "PlayerSide", "ThrowDirection", "Vector2", "StateOfGame",
  "Intent", "HumanIntent", "human_intent_to_index", "human_intent_from_index", "human_intent_to_intent",
  "GameEngine", "simulate", "QValues", "get_blank_q_values",
  "Agent", "AgentBuilder", "AgentType", "HumanPlayerAgent", "RandomAgent", "RandomRolloutAgent",
  "DijkstraAgent", "TabularQLearningAgent",
]
