import numpy as np
from particle_sim.core.forces import clip_force
from particle_sim.util import vec, length


def test_small_force_unchanged():
    f = vec(0.3, -0.4)
    out = clip_force(f, 1.0)
    assert np.array_equal(out, f)


def test_force_at_limit_unchanged():
    f = vec(3.0, 4.0)
    assert np.array_equal(clip_force(f, 5.0), f)


def test_large_force_rescaled_preserving_direction():
    f = vec(30.0, 40.0)
    out = clip_force(f, 2.0)
    assert abs(length(out) - 2.0) < 1e-12
    assert np.allclose(out / length(out), f / length(f))


def test_clip_bound_holds_for_random_forces():
    """For any f and max >= 0: |clip(f, max)| <= max + eps."""
    rng = np.random.default_rng(42)
    for _ in range(500):
        f = vec(*rng.normal(size=2) * rng.uniform(0, 100))
        m = float(rng.uniform(0, 10))
        out = clip_force(f, m)
        assert length(out) <= m + 1e-9
        if length(f) <= m:
            assert np.array_equal(out, f)


def test_zero_limit():
    assert np.allclose(clip_force(vec(1.0, 1.0), 0.0), [0.0, 0.0])
    assert np.array_equal(clip_force(vec(0.0, 0.0), 0.0), [0.0, 0.0])
