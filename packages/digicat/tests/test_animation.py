"""Tests for the blink/dance/death animation scheduler."""
import random

from digicat.animation import AnimationScheduler, AnimationState, random_hold
from digicat.config import CANONICAL, PetConfig
from digicat.timers import TimerService
from digicat.types import MODE_FRAMES, AnimMode, FrameId


def make_scheduler(hold=lambda: 1000, config=CANONICAL, on_transition=None):
    timers = TimerService()
    scheduler = AnimationScheduler(
        AnimationState(), timers, config, hold, on_transition=on_transition
    )
    return scheduler, timers


class TestIdleCycle:
    """Idle(open) -> Blinking -> Idle(open)."""

    def test_reset_shows_open_frame(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        assert scheduler.mode is AnimMode.IDLE
        assert scheduler.current_frame() is FrameId.OPEN
        assert timers.pending() == 1

    def test_blink_after_hold(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()

        timers.advance(999)
        assert scheduler.current_frame() is FrameId.OPEN

        timers.advance(1)
        assert scheduler.mode is AnimMode.BLINKING
        assert scheduler.current_frame() is FrameId.BLINK

    def test_blink_lasts_blink_duration(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        timers.advance(1000)

        timers.advance(199)
        assert scheduler.current_frame() is FrameId.BLINK
        timers.advance(1)
        assert scheduler.current_frame() is FrameId.OPEN
        assert scheduler.mode is AnimMode.IDLE

    def test_cycle_repeats(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        # Second blink starts at 1000 + 200 + 1000.
        timers.advance(2199)
        assert scheduler.current_frame() is FrameId.OPEN
        timers.advance(1)
        assert scheduler.current_frame() is FrameId.BLINK

    def test_hold_drawn_once_per_cycle(self):
        holds = iter([500, 1500, 700])
        drawn = []

        def hold():
            value = next(holds)
            drawn.append(value)
            return value

        scheduler, timers = make_scheduler(hold=hold)
        scheduler.reset()
        assert drawn == [500]

        timers.advance(500 + 200)
        assert drawn == [500, 1500]

        timers.advance(1500)
        assert scheduler.current_frame() is FrameId.BLINK
        timers.advance(200)
        assert drawn == [500, 1500, 700]


class TestDancing:
    """Dance mode alternates two frames every dance period."""

    def test_enter_dancing(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dancing()

        assert scheduler.mode is AnimMode.DANCING
        assert scheduler.current_frame() is FrameId.DANCE_RIGHT
        # The blink timer was released.
        assert timers.pending() == 1

    def test_dance_frames_alternate(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dancing()

        timers.advance(500)
        assert scheduler.current_frame() is FrameId.DANCE_LEFT
        timers.advance(500)
        assert scheduler.current_frame() is FrameId.DANCE_RIGHT

    def test_no_blink_while_dancing(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dancing()

        for _ in range(40):
            timers.advance(250)
            assert scheduler.mode is AnimMode.DANCING

    def test_dance_again_restarts(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dancing()
        timers.advance(500)
        assert scheduler.current_frame() is FrameId.DANCE_LEFT

        scheduler.enter_dancing()
        assert scheduler.current_frame() is FrameId.DANCE_RIGHT
        timers.advance(499)
        assert scheduler.current_frame() is FrameId.DANCE_RIGHT
        assert timers.pending() == 1

    def test_stop_dancing_returns_to_idle(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dancing()
        timers.advance(500)

        scheduler.stop_dancing()

        assert scheduler.mode is AnimMode.IDLE
        assert scheduler.current_frame() is FrameId.OPEN
        assert timers.pending() == 1
        timers.advance(1000)
        assert scheduler.current_frame() is FrameId.BLINK

    def test_stop_dancing_when_idle_is_noop(self):
        drawn = []

        def hold():
            drawn.append(1000)
            return 1000

        scheduler, timers = make_scheduler(hold=hold)
        scheduler.reset()
        timers.advance(600)

        scheduler.stop_dancing()

        assert drawn == [1000]
        timers.advance(400)
        assert scheduler.current_frame() is FrameId.BLINK


class TestDead:
    """Dead is absorbing until reset()."""

    def test_enter_dead_cancels_timers(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dead()

        assert scheduler.current_frame() is FrameId.DEAD
        assert timers.pending() == 0

    def test_dead_from_dancing(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dancing()
        scheduler.enter_dead()

        timers.advance(10_000)
        assert scheduler.mode is AnimMode.DEAD
        assert timers.pending() == 0

    def test_dead_ignores_dance_requests(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dead()

        scheduler.enter_dancing()
        scheduler.stop_dancing()

        assert scheduler.mode is AnimMode.DEAD
        assert timers.pending() == 0

    def test_reset_leaves_dead(self):
        scheduler, timers = make_scheduler()
        scheduler.reset()
        scheduler.enter_dead()

        scheduler.reset()

        assert scheduler.mode is AnimMode.IDLE
        assert scheduler.current_frame() is FrameId.OPEN
        assert timers.pending() == 1


def test_stop_keeps_frame_and_releases_timer():
    scheduler, timers = make_scheduler()
    scheduler.reset()
    scheduler.enter_dancing()
    timers.advance(500)

    scheduler.stop()

    assert scheduler.current_frame() is FrameId.DANCE_LEFT
    assert timers.pending() == 0


def test_transition_hook():
    seen = []
    scheduler, timers = make_scheduler(
        on_transition=lambda old, new: seen.append((old, new))
    )
    scheduler.reset()
    timers.advance(1200)
    scheduler.enter_dancing()
    scheduler.enter_dead()

    assert seen == [
        (AnimMode.IDLE, AnimMode.BLINKING),
        (AnimMode.BLINKING, AnimMode.IDLE),
        (AnimMode.IDLE, AnimMode.DANCING),
        (AnimMode.DANCING, AnimMode.DEAD),
    ]


def test_frame_index_always_valid():
    scheduler, timers = make_scheduler(hold=lambda: 300)
    scheduler.reset()
    rng = random.Random(7)
    for _ in range(300):
        action = rng.random()
        if action < 0.05:
            scheduler.enter_dancing()
        elif action < 0.1:
            scheduler.stop_dancing()
        timers.advance(rng.randint(0, 400))
        state = scheduler.state
        assert 0 <= state.frame_index < len(MODE_FRAMES[state.mode])


def test_random_hold_within_bounds():
    config = PetConfig(blink_min_hold_ms=1000, blink_max_hold_ms=3000)
    draw = random_hold(config, random.Random(99))
    values = [draw() for _ in range(200)]
    assert all(1000 <= v <= 3000 for v in values)
    assert len(set(values)) > 1


def test_random_hold_is_deterministic_for_a_seed():
    a = random_hold(CANONICAL, random.Random(5))
    b = random_hold(CANONICAL, random.Random(5))
    assert [a() for _ in range(10)] == [b() for _ in range(10)]
