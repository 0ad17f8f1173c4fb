"""Core agent base class for frisbee agents.

Every strategy answers `act(side, engine)` with exactly one Intent per
decision cycle. Lookahead strategies must only ever touch clones of the
engine they are handed.
"""
from abc import ABC, abstractmethod
from enum import Enum
import logging
import random
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel

from ..engine import GameEngine
from ..intents import Intent
from ..typings import PlayerSide

logger = logging.getLogger(__name__)


def AGENT_SEED_GENERATOR(): return random.Random().randint(0, 2**31 - 1)


class AgentType(Enum):
  HUMAN_PLAYER = 0
  RANDOM = 1
  RANDOM_ROLLOUT = 2
  DIJKSTRA = 3
  TABULAR_Q_LEARNING = 4
  NONE = 5


def agent_type_from_int(value: int) -> AgentType:
  """Map a numeric agent selector (e.g. from a menu or CLI) to an AgentType."""
  if 0 <= value < AgentType.NONE.value:
    return AgentType(value)
  return AgentType.NONE


class Agent(ABC):
  name: str
  agent_type: ClassVar[AgentType] = AgentType.NONE

  agent_name_to_cls: ClassVar[dict[str, type["Agent"]]] = {}
  agent_type_to_cls: ClassVar[dict[AgentType, type["Agent"]]] = {}

  def __init__(self, *, seed: int | None = None, name: str | None = None, debug: bool = False) -> None:
    self.name = name if name is not None else self.__class__.__name__
    self.debug = debug
    # Use a local RNG instance to guarantee reproducible behavior
    if seed is None:
      seed = AGENT_SEED_GENERATOR()
    self._seed = seed
    self.rng = random.Random(seed)

  @classmethod
  def __init_subclass__(cls, **kwargs):
    cls.agent_name_to_cls[cls.__name__] = cls
    if cls.agent_type != AgentType.NONE:
      cls.agent_type_to_cls[cls.agent_type] = cls
    super().__init_subclass__(**kwargs)

  def reset(self, seed: int | None = None) -> None:
    if seed is None:
      seed = AGENT_SEED_GENERATOR()
    self._seed = seed
    self.rng.seed(seed)
    self._reset()

  def _reset(self) -> None:
    """Internal reset hook called before each match. Default is a no-op."""
    pass

  @abstractmethod
  def act(self, side: PlayerSide, engine: GameEngine) -> Intent:
    """Return the Intent for `side` in the current state of `engine`."""

  def get_type(self) -> AgentType:
    return self.agent_type

  def metadata(self) -> dict:
    """Return metadata about the agent, recorded alongside match results."""
    metadata = {
        "type": self.__class__.__name__,
        "name": self.name,
        "seed": self._seed,
    }
    if (extra := self._metadata()):
      metadata.update(extra)
    return metadata

  def _metadata(self) -> dict:
    return {}

  def _log_decision(self, side: PlayerSide, intent: Intent, **details: Any) -> None:
    level = logging.INFO if self.debug else logging.DEBUG
    if logger.isEnabledFor(level):
      extra = " ".join(f"{k}={v}" for k, v in details.items())
      logger.log(level, "[%s] side=%s intent=%s %s", self.name, side, intent, extra)


BaseAgent = TypeVar('BaseAgent', bound=Agent)


class AgentBuilder(BaseModel):
  """Serializable recipe for constructing an agent.

  `cls_name` is either a registered class name (e.g. "DijkstraAgent") or an
  AgentType name (e.g. "DIJKSTRA").
  """

  cls_name: str
  name: str | None = None
  seed: int | None = None
  kwargs: dict[str, Any] = {}

  def build(self) -> Agent:
    agent_cls = Agent.agent_name_to_cls.get(self.cls_name)
    if agent_cls is None and self.cls_name in AgentType.__members__:
      agent_cls = Agent.agent_type_to_cls.get(AgentType[self.cls_name])
    if agent_cls is None:
      raise ValueError(f"Unknown agent class name: {self.cls_name}")
    return agent_cls(seed=self.seed, name=self.name, **self.kwargs)


def build_agent(agent_type: AgentType, **kwargs: Any) -> Agent:
  """Instantiate the registered agent class for `agent_type`."""
  agent_cls = Agent.agent_type_to_cls.get(agent_type)
  if agent_cls is None:
    raise ValueError(f"No agent registered for {agent_type}")
  return agent_cls(**kwargs)


__all__ = ["Agent", "AgentType", "AgentBuilder", "BaseAgent", "agent_type_from_int", "build_agent"]
