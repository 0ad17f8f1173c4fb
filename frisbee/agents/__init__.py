"""Agent strategies. Importing this package registers every agent class."""
from .core import Agent, AgentBuilder, AgentType, agent_type_from_int, build_agent
from .human import HumanPlayerAgent
from .random import RandomAgent
from .rollout import RandomRolloutAgent, RolloutConfig
from .dijkstra import DijkstraAgent, DijkstraEvaluationConfig, SearchNode, get_best
from .qlearning import TabularQLearningAgent

__all__ = [
  "Agent", "AgentBuilder", "AgentType", "agent_type_from_int", "build_agent",
  "HumanPlayerAgent", "RandomAgent", "RandomRolloutAgent", "RolloutConfig",
  "DijkstraAgent", "DijkstraEvaluationConfig", "SearchNode", "get_best",
  "TabularQLearningAgent",
]
