"""HumanPlayerAgent: turns captured controller flags into an Intent."""
from .core import Agent, AgentType
from ..engine import GameEngine
from ..intents import Intent, human_intent_to_intent
from ..typings import PlayerSide


class HumanPlayerAgent(Agent):
  agent_type = AgentType.HUMAN_PLAYER

  def act(self, side: PlayerSide, engine: GameEngine) -> Intent:
    return human_intent_to_intent(engine, engine.get_input(side), side)


__all__ = ["HumanPlayerAgent"]
