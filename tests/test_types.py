import numpy as np
import pytest
from agent_sim.types import Agent, Triangle


def test_triangle_properties():
    tri = Triangle([(0, 0), (40, -100), (-40, -100)])
    assert tri.apex == pytest.approx([0.0, 0.0])
    assert tri.base_mid == pytest.approx([0.0, -100.0])
    left, right = tri.side_lengths[0], tri.side_lengths[2]
    assert left == pytest.approx(right)
    assert tri.side_lengths[1] == pytest.approx(80.0)


def test_triangle_is_immutable():
    tri = Triangle([(0, 0), (1, 0), (0, 1)])
    with pytest.raises(ValueError):
        tri.vertices[0, 0] = 3.0
    moved = tri.translated((1.0, 2.0))
    assert moved.apex == pytest.approx([1.0, 2.0])
    assert tri.apex == pytest.approx([0.0, 0.0])


def test_triangle_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Triangle([(0, 0), (1, 0)])
    with pytest.raises(ValueError):
        Triangle([(0, 0, 0), (1, 0, 0), (0, 1, 0)])


def test_agent_defaults():
    agent = Agent()
    assert agent.velocity.tolist() == [0.0, 0.0]
    assert agent.acceleration.tolist() == [0.0, 0.0]
    assert agent.velocity_damping == 0.9925
    assert agent.acceleration_damping == 0.75
    assert agent.max_speed.tolist() == [2.0, 2.0]
    assert agent.speed == 0.0
    assert agent.heading == 0.0
    assert np.array_equal(agent.vertices, [(0, 0), (40, -100), (-40, -100)])


@pytest.mark.parametrize("kwargs", [
    {"velocity_damping": 0.0},
    {"velocity_damping": 1.5},
    {"acceleration_damping": -0.1},
    {"max_speed": (2.0, 0.0)},
])
def test_agent_rejects_bad_coefficients(kwargs):
    with pytest.raises(ValueError):
        Agent(**kwargs)


def test_apply_impulse_replaces_array():
    agent = Agent()
    before = agent.acceleration
    agent.apply_impulse((0.0, 0.045))
    assert before.tolist() == [0.0, 0.0]
    assert agent.acceleration == pytest.approx([0.0, 0.045])


def test_agent_vectors_are_read_only():
    agent = Agent(velocity=[0.1, 0.2])
    for v in (agent.velocity, agent.acceleration, agent.max_speed):
        with pytest.raises(ValueError):
            v[0] = 5.0

    agent.apply_impulse((0.0, 0.045))
    with pytest.raises(ValueError):
        agent.acceleration[1] = 1.0


def test_step_keeps_vectors_read_only():
    from agent_sim.core.integrators import damped_euler_step

    agent = Agent(acceleration=(0.01, 0.0))
    damped_euler_step(agent)
    assert not agent.velocity.flags.writeable
    assert not agent.acceleration.flags.writeable
    assert not agent.vertices.flags.writeable
