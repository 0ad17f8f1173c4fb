"""Deterministic point-mass engine used as a test double for `GameEngine`.

Just enough kinematics for lookahead to be meaningful: players move or
dash inside their own half, the disc follows its holder or flies in a
straight line bouncing off the side walls, and crossing a goal line ends
the point.
"""
from dataclasses import dataclass, replace
import math

from frisbee.engine import DiscView, PlayerView
from frisbee.intents import HumanIntent, Intent, IntentType
from frisbee.qvalues import QValues
from frisbee.typings import PlayerSide, StateOfGame, ThrowDirection, Vector2

HALF_WIDTH = 10.0
HALF_HEIGHT = 5.0
SPEED = 0.5
DASH_SPEED = 1.5
DASH_FRAMES = 3
CATCH_RADIUS = 0.75
THROW_SPEED = 1.0

_THROW_VECTORS = {
  ThrowDirection.UP: Vector2(1.0, 1.0).normalized(),
  ThrowDirection.LIGHT_UP: Vector2(1.0, 0.5).normalized(),
  ThrowDirection.MIDDLE: Vector2(1.0, 0.0),
  ThrowDirection.LIGHT_DOWN: Vector2(1.0, -0.5).normalized(),
  ThrowDirection.DOWN: Vector2(1.0, -1.0).normalized(),
}


@dataclass(frozen=True)
class Body:
  pos: Vector2
  score: int = 0
  dash_frames: int = 0
  dash_dir: Vector2 = Vector2()


@dataclass(frozen=True)
class Disc:
  pos: Vector2
  vel: Vector2 = Vector2()
  held_by: PlayerSide | None = None
  thrown_by: PlayerSide | None = None


def _clamp(v: float, lo: float, hi: float) -> float:
  return max(lo, min(hi, v))


class KinematicEngine:
  def __init__(
      self,
      *,
      left: Vector2 = Vector2(-5.0, 0.0),
      right: Vector2 = Vector2(5.0, 0.0),
      disc: Vector2 = Vector2(0.0, 0.0),
      held_by: PlayerSide | None = None,
      scores: tuple[int, int] = (0, 0),
      dashing: tuple[bool, bool] = (False, False),
      state: StateOfGame = StateOfGame.PLAYING,
      max_ticks: int = 10_000,
      explo_rate: float = 0.0,
      q_values: QValues | None = None,
  ) -> None:
    self.bodies = (
      Body(left, scores[0], DASH_FRAMES if dashing[0] else 0, Vector2(1.0, 0.0)),
      Body(right, scores[1], DASH_FRAMES if dashing[1] else 0, Vector2(-1.0, 0.0)),
    )
    if held_by is not None:
      disc = self.bodies[held_by.index].pos
    self._disc = Disc(disc, held_by=held_by)
    self.state = state
    self.ticks = 0
    self.max_ticks = max_ticks
    self.explo_rate = explo_rate
    self.q_values = q_values if q_values is not None else QValues()
    self.inputs = [HumanIntent.IDLE, HumanIntent.IDLE]

  def clone(self) -> "KinematicEngine":
    # bodies and disc are immutable, so sharing them is safe
    other = object.__new__(KinematicEngine)
    other.__dict__.update(self.__dict__)
    other.inputs = list(self.inputs)
    return other

  def snapshot(self) -> tuple:
    return (self.bodies, self._disc, self.state, self.ticks, tuple(self.inputs))

  def is_playing(self) -> bool:
    return self.state == StateOfGame.PLAYING

  def player(self, side: PlayerSide) -> PlayerView:
    body = self.bodies[side.index]
    return PlayerView(side=side, pos=body.pos, score=body.score, is_dashing=body.dash_frames > 0)

  @property
  def disc(self) -> DiscView:
    return DiscView(pos=self._disc.pos, held_by=self._disc.held_by)

  def get_input(self, side: PlayerSide) -> HumanIntent:
    return self.inputs[side.index]

  def set_input(self, side: PlayerSide, flags: HumanIntent) -> None:
    self.inputs[side.index] = flags

  def state_hash(self) -> int:
    def cell(v: float, half: float, n: int) -> int:
      return int(_clamp((v + half) / (2 * half) * n, 0, n - 1))
    h = 0
    for body in self.bodies:
      h = h * 36 + cell(body.pos.x, HALF_WIDTH, 6) * 6 + cell(body.pos.y, HALF_HEIGHT, 6)
    h = h * 40 + cell(self._disc.pos.x, HALF_WIDTH, 8) * 5 + cell(self._disc.pos.y, HALF_HEIGHT, 5)
    holder = 0 if self._disc.held_by is None else 1 + self._disc.held_by.index
    return h * 3 + holder

  def advance_idle(self) -> None:
    self.step((Intent.none(), Intent.none()))

  def step(self, intents: tuple[Intent, Intent]) -> None:
    if not self.is_playing():
      return
    bodies = list(self.bodies)
    for side in PlayerSide:
      bodies[side.index] = self._move(side, bodies[side.index], intents[side.index])
    self.bodies = tuple(bodies)
    self._update_disc()
    self.ticks += 1
    if self.is_playing() and self.ticks >= self.max_ticks:
      self.state = StateOfGame.FINISHED

  def _move(self, side: PlayerSide, body: Body, intent: Intent) -> Body:
    if body.dash_frames > 0:
      return self._place(side, replace(body, dash_frames=body.dash_frames - 1), body.dash_dir * DASH_SPEED)
    if intent.type == IntentType.MOVE:
      return self._place(side, body, intent.direction * SPEED)
    if intent.type == IntentType.DASH:
      dashing = replace(body, dash_frames=DASH_FRAMES - 1, dash_dir=intent.direction)
      return self._place(side, dashing, intent.direction * DASH_SPEED)
    if intent.type == IntentType.THROW and self._disc.held_by == side:
      vec = _THROW_VECTORS[intent.direction]
      if side == PlayerSide.RIGHT:
        vec = Vector2(-vec.x, vec.y)
      self._disc = Disc(body.pos, vel=vec * THROW_SPEED, held_by=None, thrown_by=side)
    return body

  def _place(self, side: PlayerSide, body: Body, delta: Vector2) -> Body:
    p = body.pos + delta
    if side == PlayerSide.LEFT:
      x = _clamp(p.x, -HALF_WIDTH, 0.0)
    else:
      x = _clamp(p.x, 0.0, HALF_WIDTH)
    return replace(body, pos=Vector2(x, _clamp(p.y, -HALF_HEIGHT, HALF_HEIGHT)))

  def _update_disc(self) -> None:
    disc = self._disc
    if disc.held_by is not None:
      self._disc = replace(disc, pos=self.bodies[disc.held_by.index].pos)
      return
    pos = disc.pos + disc.vel
    vel = disc.vel
    if abs(pos.y) > HALF_HEIGHT:
      pos = Vector2(pos.x, math.copysign(2 * HALF_HEIGHT, pos.y) - pos.y)
      vel = Vector2(vel.x, -vel.y)
    self._disc = replace(disc, pos=pos, vel=vel)

    if pos.x >= HALF_WIDTH:
      self._score(PlayerSide.LEFT, pos)
      return
    if pos.x <= -HALF_WIDTH:
      self._score(PlayerSide.RIGHT, pos)
      return
    for side in PlayerSide:
      if side == disc.thrown_by:
        continue
      if (self.bodies[side.index].pos - pos).length() <= CATCH_RADIUS:
        self._disc = Disc(self.bodies[side.index].pos, held_by=side)
        return

  def _score(self, side: PlayerSide, pos: Vector2) -> None:
    points = 5 if abs(pos.y) > HALF_HEIGHT / 2 else 3
    bodies = list(self.bodies)
    bodies[side.index] = replace(bodies[side.index], score=bodies[side.index].score + points)
    self.bodies = tuple(bodies)
    self.state = StateOfGame.SCORED
