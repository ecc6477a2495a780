from __future__ import annotations

from sweep.clock import FrameClock
from sweep.loop import Animator


class FakeClock:
    fps = 60

    def __init__(self, step=1 / 60):
        self.t = 0.0
        self.step = step
        self.calls = 0

    def now(self):
        return self.t

    def next_frame(self):
        self.calls += 1
        self.t += self.step
        return self.t


def test_draw_receives_clock_timestamps():
    clock, seen = FakeClock(0.5), []
    frames = Animator(clock, seen.append).run(max_frames=4)
    assert frames == 4
    assert seen == [0.5, 1.0, 1.5, 2.0]


def test_cancel_from_pump_prevents_draw():
    clock, seen = FakeClock(), []
    anim = Animator(clock, seen.append)
    anim.pump = lambda: anim.cancel() if clock.calls == 3 else None
    assert anim.run() == 2
    assert len(seen) == 2


def test_cancel_from_draw_stops_loop():
    clock = FakeClock()
    anim = Animator(clock, lambda t: anim.cancel())
    assert anim.run() == 1
    assert clock.calls == 1


def test_cancelled_before_start_draws_nothing():
    clock = FakeClock()
    anim = Animator(clock, lambda t: None)
    anim.cancel()
    assert anim.run() == 0
    assert clock.calls == 0


class _TickSpy:
    def __init__(self):
        self.ticks = []

    def tick(self, fps):
        self.ticks.append(fps)
        return 16

    def get_fps(self):
        return 59.9


def test_frame_clock_paces_and_reports_seconds():
    spy, ms = _TickSpy(), [0]
    clock = FrameClock(30, clock=spy, ticks=lambda: ms[0])
    ms[0] = 1500
    assert clock.next_frame() == 1.5
    assert spy.ticks == [30]
    ms[0] = 2750
    assert clock.now() == 2.75
    assert clock.get_fps() == 59.9
