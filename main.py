"""Small runner to pit two agents against each other.

The engine lives in the host game, so it is passed as an import path to a
factory taking the match seed:

  python main.py match.example.toml my_game.engine:new_engine [results.jsonl]
"""

from importlib import import_module
import logging
import sys

from frisbee.match import MatchConfig, save_results, summarize


def load_factory(path: str):
  module_name, _, attr = path.partition(":")
  if not attr:
    raise ValueError(f"engine factory must look like 'module:callable', got {path!r}")
  return getattr(import_module(module_name), attr)


if __name__ == "__main__":
  if len(sys.argv) < 3:
    print(__doc__)
    sys.exit(2)
  logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

  config = MatchConfig.load(sys.argv[1])
  factory = load_factory(sys.argv[2])
  print(f"Run {config.n_matches} matches: {config.left.cls_name} (left) vs {config.right.cls_name} (right)")

  results = config.run(factory)
  for i, r in enumerate(results):
    print(f"  match {i}: score={r.scores[0]}-{r.scores[1]} cycles={r.cycles}")
  print("win rates:", summarize(results))
  if len(sys.argv) > 3:
    print("saved to", save_results(results, sys.argv[3]))
