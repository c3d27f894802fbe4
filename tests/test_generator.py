import numpy as np

from chromalite import Color, random_color

def test_random_color():
    for _ in range(50):
        c = random_color()
        assert isinstance(c, Color)
        assert all(0 <= v <= 255 for v in c.rgb)
        assert c.alpha == 1.0
        assert len(c.hex) == 7

def test_seeded_generator_is_reproducible():
    a = random_color(np.random.default_rng(1234))
    b = random_color(np.random.default_rng(1234))
    assert a == b
