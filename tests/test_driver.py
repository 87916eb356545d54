# MIT License (see LICENSE)
import io

import numpy as np
import pytest

from sphere_sim.constants import DEFAULT_PARTICLE_COUNT, RESET_DELAY
from sphere_sim.driver import Driver, RepeatTimer
from sphere_sim.renderer import BufferedRenderer, DebugRenderer, NullRenderer
from sphere_sim.simulation import Simulation


def test_timer_cadence():
    timer = RepeatTimer(5.0)
    assert not timer.armed
    assert not timer.due(100.0)

    timer.arm(1.0)
    assert not timer.due(5.9)
    assert timer.due(6.0)
    assert not timer.due(6.5)
    assert timer.due(11.0)

    # Several missed deadlines fire once and realign.
    assert timer.due(30.0)
    assert timer.next_due == pytest.approx(31.0)
    assert not timer.due(30.5)

    timer.disarm()
    assert not timer.due(1000.0)


def test_timer_rejects_bad_interval():
    with pytest.raises(ValueError):
        RepeatTimer(0.0)


def test_start_does_not_arm_timer():
    driver = Driver(Simulation(rng=np.random.default_rng(1)))
    driver.start(10)
    last = driver.run(400, frame_dt=1 / 60)
    assert last == pytest.approx(400 / 60)
    # One baseline frame, never reset afterwards.
    assert driver.simulation.clock.total_frames == 399


def test_auto_reset_after_count_change():
    sim = Simulation(rng=np.random.default_rng(2))
    driver = Driver(sim, reset_interval=5.0)
    driver.start(10)
    driver.set_particle_count(20, now=1.0)
    assert sim.particle_count == 20

    driver.frame(2.0)
    assert driver.last_fps == 60.0
    driver.frame(3.0)
    driver.frame(4.0)
    assert driver.last_fps == pytest.approx(1.0)
    assert sim.clock.total_frames == 2

    positions = np.array([p.position for p in sim.particles])
    driver.frame(6.0)  # due: repeat() then baseline advance
    assert sim.clock.total_frames == 0
    assert len(sim.particles) == 20
    assert not np.array_equal(positions, np.array([p.position for p in sim.particles]))


def test_buffered_renderer_records_frames():
    renderer = BufferedRenderer()
    driver = Driver(Simulation(rng=np.random.default_rng(3)), renderer=renderer)
    driver.start(5)
    driver.run(10)
    assert len(renderer.frames) == 10
    frame = renderer.frames[-1]
    assert len(frame["particles"]) == 5
    assert set(frame["particles"][0]) == {"position", "velocity", "radius", "color"}

    renderer.clear()
    assert renderer.frames == []


def test_debug_renderer_output():
    out = io.StringIO()
    sim = Simulation(rng=np.random.default_rng(4))
    sim.reset(3)
    DebugRenderer(out).render_simulation(sim)
    lines = out.getvalue().split("\n")
    assert lines[0] == "FPS: 60.00"
    assert lines[1].startswith("[0] r=")
    assert " v=(" in lines[1]
    assert lines[3].startswith("[2] r=")

    out = io.StringIO()
    DebugRenderer(out, verbose=False).render_simulation(sim, fps=30.0)
    text = out.getvalue()
    assert text.startswith("FPS: 30.00")
    assert " v=(" not in text


def test_null_renderer_and_bad_frame_dt():
    driver = Driver(Simulation(rng=np.random.default_rng(5)), renderer=NullRenderer())
    driver.start(3)
    with pytest.raises(ValueError):
        driver.run(5, frame_dt=0.0)


def test_run_without_frames_returns_none():
    driver = Driver(Simulation(rng=np.random.default_rng(6)))
    driver.start(3)
    assert driver.run(0) is None
    assert driver.simulation.clock.prev_time == 0.0
    assert driver.run(1, frame_dt=0.5) == 0.5


def test_start_uses_default_count():
    driver = Driver(Simulation(rng=np.random.default_rng(4)))
    assert driver.reset_interval == RESET_DELAY
    assert not hasattr(driver, "default_count")

    driver.start()

    assert driver.simulation.particle_count == DEFAULT_PARTICLE_COUNT
    assert len(driver.simulation.particles) == DEFAULT_PARTICLE_COUNT
