"""
Pure game logic for RunCat Endless — no pygame dependency.
Used by the pygame front end, the headless simulator and the batch runner.
"""

from __future__ import annotations

import random
import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum

# ─────────────────────────────────────────
# Constants
# ─────────────────────────────────────────
TICK_MS = 100
WINDOW_LANES = 20

JUMP_THRESHOLD = 17          # initial burst countdown, also the auto-play look-ahead
INITIAL_LIMIT = 5
QUIET_LIMIT = 5              # ceiling after a burst that injected nothing
BUSY_LIMIT = 10              # ceiling after a burst that injected obstacles
BURST_RANGE = 27


# ─────────────────────────────────────────
# Lanes
# ─────────────────────────────────────────

class LaneContent(Enum):
    FLAT = 0
    HILL = 1
    CRATER = 2
    OBSTACLE = 3


COSMETIC_LANES = (LaneContent.FLAT, LaneContent.HILL, LaneContent.CRATER)


# ─────────────────────────────────────────
# Character state machine
# ─────────────────────────────────────────

class Action(Enum):
    RUNNING = "running"
    JUMPING = "jumping"


FRAME_COUNTS = {Action.RUNNING: 5, Action.JUMPING: 10}

# Lane offsets (from the window front) where the cat touches ground level.
VULNERABLE_OFFSETS = {
    (Action.RUNNING, 0): frozenset({5, 6, 7}),
    (Action.RUNNING, 1): frozenset({5, 6}),
    (Action.RUNNING, 2): frozenset({5, 6}),
    (Action.RUNNING, 3): frozenset({5}),
    (Action.RUNNING, 4): frozenset({5, 7}),
    (Action.JUMPING, 0): frozenset({5, 6, 7}),
    (Action.JUMPING, 1): frozenset({5, 6}),
    (Action.JUMPING, 2): frozenset({5, 6}),
    (Action.JUMPING, 3): frozenset({5, 6}),
    (Action.JUMPING, 4): frozenset({5, 6}),
    (Action.JUMPING, 5): frozenset({5}),
    (Action.JUMPING, 6): frozenset(),
    (Action.JUMPING, 7): frozenset(),
    (Action.JUMPING, 8): frozenset(),
    (Action.JUMPING, 9): frozenset({7}),
}


@dataclass(frozen=True)
class CharacterState:
    action: Action
    frame: int = 0

    def __post_init__(self):
        if not 0 <= self.frame < FRAME_COUNTS[self.action]:
            raise ValueError(f"{self.action.value} frame out of range: {self.frame}")

    @property
    def key(self) -> str:
        """Sprite/replay key, e.g. ``running_3``."""
        return f"{self.action.value}_{self.frame}"


def running(frame=0) -> CharacterState:
    return CharacterState(Action.RUNNING, frame)


def jumping(frame=0) -> CharacterState:
    return CharacterState(Action.JUMPING, frame)


def vulnerable_offsets(state: CharacterState) -> frozenset:
    return VULNERABLE_OFFSETS[(state.action, state.frame)]


def advance(state: CharacterState, jump_requested: bool) -> tuple[CharacterState, bool]:
    """Return ``(next_state, jump_consumed)``.

    A jump can only start on the last running frame, or chain from the last
    jumping frame. Everything else just steps the animation.
    """
    last = FRAME_COUNTS[state.action] - 1
    if state.action is Action.RUNNING and state.frame == last and jump_requested:
        return jumping(0), True
    if state.action is Action.JUMPING and state.frame == last:
        if jump_requested:
            return jumping(0), True
        return running(0), False
    return CharacterState(state.action, (state.frame + 1) % FRAME_COUNTS[state.action]), False


# ─────────────────────────────────────────
# Obstacle stream
# ─────────────────────────────────────────

def burst_size(v: int) -> int:
    """Obstacles injected for a burst draw ``v`` in [0, 27)."""
    return sum(1 for m in (3, 9, 27) if v % m == 0)


class ObstacleStream:
    """Sliding window of lanes, consumed from the front and refilled at the back.

    Lanes beyond the window length (left over from a large burst) wait in a
    backlog behind the window and scroll in before any new cosmetic lane.
    """

    def __init__(self, rng=None, lanes=None, width=WINDOW_LANES):
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self._lanes = deque(lanes or ())
        self.counter = JUMP_THRESHOLD
        self.limit = INITIAL_LIMIT
        self.last_burst = 0
        self.fill()

    @property
    def window(self) -> tuple:
        return tuple(self._lanes)[:self.width]

    @property
    def lanes(self) -> tuple:
        return tuple(self._lanes)

    @property
    def backlog(self) -> int:
        return max(0, len(self._lanes) - self.width)

    def __len__(self):
        return len(self._lanes)

    def _cosmetic(self) -> LaneContent:
        return COSMETIC_LANES[self.rng.randrange(0, len(COSMETIC_LANES))]

    def fill(self):
        while len(self._lanes) < self.width:
            self._lanes.append(self._cosmetic())

    def purge_obstacles(self):
        self._lanes = deque(lane for lane in self._lanes if lane is not LaneContent.OBSTACLE)

    def reset_countdown(self, counter=JUMP_THRESHOLD, limit=INITIAL_LIMIT):
        self.counter = counter
        self.limit = limit

    def burst(self) -> int:
        v = self.rng.randrange(0, BURST_RANGE)
        count = burst_size(v)
        self._lanes.extend([LaneContent.OBSTACLE] * count)
        self.limit = BUSY_LIMIT if count else QUIET_LIMIT
        self.counter = self.limit
        self.last_burst = count
        return count

    def tick(self) -> LaneContent:
        """Pop the front lane, run the countdown, top the stream back up."""
        popped = self._lanes.popleft()
        self.counter -= 1
        if self.counter <= 0:
            self.burst()
        self.fill()
        return popped


# ─────────────────────────────────────────
# Collision detector
# ─────────────────────────────────────────

def judge(character: CharacterState, window) -> bool:
    """True when the cat's current frame overlaps an obstacle lane."""
    for offset in vulnerable_offsets(character):
        if offset < len(window) and window[offset] is LaneContent.OBSTACLE:
            return True
    return False


# ─────────────────────────────────────────
# Session controller
# ─────────────────────────────────────────

class SessionState(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    OVER = "over"


class Message(Enum):
    NEW_RECORD = "new_record"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    character: CharacterState
    window: tuple
    score: int
    best_score: int
    state: SessionState
    message: Message | None = None

    def encode(self) -> dict:
        """Encode as a plain dict for replay records."""
        return {
            "cat": self.character.key,
            "lanes": [lane.value for lane in self.window],
            "score": self.score,
            "best": self.best_score,
            "state": self.state.value,
            "message": self.message.value if self.message else None,
        }

    @classmethod
    def decode(cls, record: dict) -> "Snapshot":
        """Rebuild a snapshot from an ``encode()`` record."""
        action, frame = record["cat"].rsplit("_", 1)
        return cls(
            character=CharacterState(Action(action), int(frame)),
            window=tuple(LaneContent(v) for v in record["lanes"]),
            score=int(record["score"]),
            best_score=int(record["best"]),
            state=SessionState(record["state"]),
            message=Message(record["message"]) if record.get("message") else None,
        )


class MemoryScoreStore:
    """Best-score store that lives only as long as the process."""

    def __init__(self, best=0):
        self.best = best

    def load(self) -> int:
        return self.best

    def save(self, score: int) -> None:
        self.best = score


class GameSession:
    """Owns one player's session and drives it one tick at a time.

    ``store`` provides ``load()``/``save(score)`` for the best score,
    ``on_snapshot`` receives the renderable snapshot after every tick.
    All public methods hold one reentrant lock, the snapshot hook included,
    so input may come from another thread and the hook may read the session.
    """

    def __init__(self, store=None, rng=None, seed=None, autoplay=False, on_snapshot=None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.store = store if store is not None else MemoryScoreStore()
        self.autoplay = autoplay
        self.on_snapshot = on_snapshot
        self._lock = threading.RLock()

        self.state = SessionState.NOT_STARTED
        self.character = running(0)
        self.stream = ObstacleStream(self.rng)
        self.score = 0
        self.best_score = int(self.store.load())
        self.jump_requested = False
        self.message = None

    # ── Input intake ────────────────────

    def start(self):
        with self._lock:
            self._start()

    def request_jump(self):
        with self._lock:
            self._request_jump()

    def press(self):
        """Single-key input: start from a title/game-over screen, jump otherwise."""
        with self._lock:
            if self.state is SessionState.PLAYING:
                self._request_jump()
            else:
                self._start()

    def _start(self):
        if self.state is SessionState.PLAYING:
            return
        self.score = 0
        self.character = running(0)
        self.stream.reset_countdown()
        self.jump_requested = False
        self.message = None
        self.stream.purge_obstacles()
        self.stream.fill()
        self.state = SessionState.PLAYING

    def _request_jump(self):
        if self.state is SessionState.PLAYING and not self.autoplay:
            self.jump_requested = True

    # ── Tick ────────────────────────────

    def tick(self) -> Snapshot:
        with self._lock:
            if self.state is SessionState.PLAYING:
                if judge(self.character, self.stream.window):
                    self._end()
                else:
                    self._step()
            snap = self._snapshot()
            if self.on_snapshot is not None:
                self.on_snapshot(snap)
        return snap

    def _end(self):
        self.state = SessionState.OVER
        if self.score >= self.best_score:
            self.best_score = self.score
            self.message = Message.NEW_RECORD
            self.store.save(self.score)
        else:
            self.message = Message.GAME_OVER

    def _step(self):
        popped = self.stream.tick()
        if popped is LaneContent.OBSTACLE:
            self.score += 1
        self.character, consumed = advance(self.character, self.jump_requested)
        if consumed:
            self.jump_requested = False
        if self.autoplay and self.stream.window[JUMP_THRESHOLD - 1] is LaneContent.OBSTACLE:
            self.jump_requested = True

    # ── Snapshot ────────────────────────

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> Snapshot:
        return Snapshot(
            character=self.character,
            window=self.stream.window,
            score=self.score,
            best_score=self.best_score,
            state=self.state,
            message=self.message,
        )

    @property
    def counter(self) -> int:
        return self.stream.counter

    @property
    def limit(self) -> int:
        return self.stream.limit
