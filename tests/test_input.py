import numpy as np
import pytest
from agent_sim.input import Key, InputQueue, impulse_for
from agent_sim.types import Agent


def test_key_names():
    assert Key.from_name("ArrowUp") is Key.UP
    assert Key.from_name("ArrowLeft") is Key.LEFT
    assert Key.from_name("down") is Key.DOWN
    assert Key.from_name("RIGHT") is Key.RIGHT
    assert Key.from_name("w") is None
    assert Key.from_name("Space") is None


def test_impulse_directions():
    assert impulse_for(Key.UP) == pytest.approx([0.0, 0.045])
    assert impulse_for(Key.DOWN) == pytest.approx([0.0, -0.045])
    assert impulse_for(Key.RIGHT) == pytest.approx([0.045, 0.0])
    assert impulse_for(Key.LEFT) == pytest.approx([-0.045, 0.0])
    assert impulse_for(Key.UP, magnitude=1.0) == pytest.approx([0.0, 1.0])


def test_queue_is_deferred_until_drain():
    agent = Agent()
    queue = InputQueue()
    assert queue.push(Key.UP)
    assert queue.push("ArrowRight")
    assert len(queue) == 2
    assert agent.acceleration.tolist() == [0.0, 0.0]

    assert queue.drain(agent) == 2
    assert len(queue) == 0
    assert agent.acceleration == pytest.approx([0.045, 0.045])


def test_repeated_presses_accumulate():
    agent = Agent()
    queue = InputQueue()
    for _ in range(3):
        queue.push(Key.DOWN)
    queue.push(Key.UP)
    queue.drain(agent)
    assert agent.acceleration == pytest.approx([0.0, -0.09])


def test_unknown_key_is_ignored():
    queue = InputQueue()
    assert queue.push("Escape") is False
    assert len(queue) == 0


def test_bad_key_type():
    with pytest.raises(TypeError):
        InputQueue().push(38)


def test_clear():
    queue = InputQueue()
    queue.push(Key.UP)
    queue.clear()
    agent = Agent()
    assert queue.drain(agent) == 0
    assert np.array_equal(agent.acceleration, [0.0, 0.0])
