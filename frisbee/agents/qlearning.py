"""TabularQLearningAgent: epsilon-greedy lookup in the shared value table."""
import numpy as np

from .core import Agent, AgentType
from ..consts import ACTION_COUNT
from ..engine import GameEngine
from ..intents import Intent, human_intent_from_index, human_intent_to_intent
from ..typings import PlayerSide


def max_index(values: np.ndarray) -> int:
  """Index of the largest value; the first one wins on ties."""
  return int(np.argmax(values))


class TabularQLearningAgent(Agent):
  agent_type = AgentType.TABULAR_Q_LEARNING

  def choose_index(self, side: PlayerSide, engine: GameEngine) -> int:
    """Return the action index for `side`, exploring with `engine.explo_rate`."""
    if self.rng.random() < engine.explo_rate:
      return self.rng.randrange(ACTION_COUNT)
    entry = engine.q_values.get(engine.state_hash())
    if entry is None:
      # unseen state
      return 0
    return max_index(np.asarray(entry[side.index]))

  def act(self, side: PlayerSide, engine: GameEngine) -> Intent:
    index = self.choose_index(side, engine)
    flags = human_intent_from_index(index)
    # The chosen flags are published as this side's input so the rest of
    # the game sees the agent exactly like a controller.
    engine.set_input(side, flags)
    intent = human_intent_to_intent(engine, flags, side)
    self._log_decision(side, intent, index=index)
    return intent


__all__ = ["TabularQLearningAgent", "max_index"]
