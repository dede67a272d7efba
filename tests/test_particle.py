from __future__ import annotations

import pytest

from goldsky.particle import burst


def test_burst_spawns_configured_count(cfg, rng) -> None:
    particles = burst(100, 200, cfg, rng=rng)
    assert len(particles) == cfg.particle_count
    for p in particles:
        assert (p.x, p.y) == (100, 200)
        assert -100 <= p.vx < 100
        assert -150 <= p.vy < -50
        assert 3 <= p.size < 8
        assert p.life == p.max_life == cfg.particle_lifetime


def test_burst_count_override(cfg, rng) -> None:
    assert len(burst(0, 0, cfg, count=2, rng=rng)) == 2


def test_gravity_and_fade(cfg, rng) -> None:
    p = burst(0, 0, cfg, count=1, rng=rng)[0]
    vy = p.vy
    p.advance(0.1)
    assert p.vy == pytest.approx(vy + cfg.gravity * 0.1)
    assert p.life == pytest.approx(400)
    assert p.alpha == pytest.approx(0.8)
    assert not p.is_expired()

    p.advance(0.4)
    assert p.is_expired()
    assert p.alpha == 0
