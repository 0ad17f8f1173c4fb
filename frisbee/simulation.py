"""Forward simulation of a single candidate intent on a cloned engine."""
from .engine import GameEngine, intents_for
from .intents import Intent
from .typings import PlayerSide


def simulate(engine: GameEngine, side: PlayerSide, intent: Intent, frames: int) -> tuple[int, Intent]:
  """Play `intent` for one step on a clone, then idle-advance it.

  The clone is advanced for at most `frames` ticks and stops as soon as the
  game leaves the playing state. Returns the acting side's score at the end
  together with `intent`, so callers can track the best candidate without
  recomputing it. `engine` itself is never mutated.
  """
  sim = engine.clone()
  sim.step(intents_for(side, intent))
  for _ in range(int(frames)):
    sim.advance_idle()
    if not sim.is_playing():
      break
  return sim.player(side).score, intent


__all__ = ["simulate"]
