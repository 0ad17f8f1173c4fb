"""Hashed-state action-value table read by the tabular Q-learning agent.

Training and persistence happen elsewhere; this module only defines the
table's shape and a blank initializer.
"""
from collections.abc import Iterator, Mapping

import numpy as np

from .consts import ACTION_COUNT, MAX_STATE_HASHES
from .typings import PlayerSide

QValueRow = np.ndarray  # shape (ACTION_COUNT,), float32


class QValues(Mapping[int, tuple[QValueRow, QValueRow]]):
  """Mapping from a state hash to a (left, right) pair of action-value arrays.

  Missing keys are legal and mean "state never seen".
  """

  def __init__(self, entries: Mapping[int, tuple[QValueRow, QValueRow]] | None = None) -> None:
    self._entries: dict[int, tuple[QValueRow, QValueRow]] = {}
    if entries:
      for key, (left, right) in entries.items():
        self._entries[int(key)] = (_as_row(left), _as_row(right))

  def __getitem__(self, key: int) -> tuple[QValueRow, QValueRow]:
    return self._entries[key]

  def __iter__(self) -> Iterator[int]:
    return iter(self._entries)

  def __len__(self) -> int:
    return len(self._entries)

  def __contains__(self, key: object) -> bool:
    return key in self._entries

  def values_for(self, key: int, side: PlayerSide) -> QValueRow | None:
    """Return `side`'s action values for state `key`, or None if unseen."""
    entry = self._entries.get(key)
    if entry is None:
      return None
    return entry[side.index]

  def __repr__(self) -> str:
    return f"QValues(<{len(self._entries)} states>)"


def _as_row(values) -> QValueRow:
  row = np.asarray(values, dtype=np.float32)
  if row.shape != (ACTION_COUNT,):
    raise ValueError(f"action-value row must have shape ({ACTION_COUNT},), got {row.shape}")
  return row


def get_blank_q_values(size: int = MAX_STATE_HASHES) -> QValues:
  """Return a table with all-zero rows for every hash in `[0, size)`.

  All rows are views into a single contiguous block.
  """
  block = np.zeros((size, 2, ACTION_COUNT), dtype=np.float32)
  table = QValues()
  table._entries = {i: (block[i, 0], block[i, 1]) for i in range(size)}
  return table


__all__ = ["QValues", "QValueRow", "get_blank_q_values"]
