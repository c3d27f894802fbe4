from chromalite import Color


def test_with_alpha_returns_new_color():
    """Changing alpha leaves the original color untouched."""
    rgb = Color(128, 64, 192)
    rgba = rgb.with_alpha(0.8)
    assert rgba is not rgb
    assert rgba.rgba == (128, 64, 192, 0.8)
    assert rgb.alpha == 1.0


def test_set_alpha_alias():
    assert Color(1, 2, 3).set_alpha(0.3) == Color(1, 2, 3, 0.3)


def test_with_alpha_clamps():
    c = Color(10, 20, 30)
    assert c.with_alpha(2).alpha == 1.0
    assert c.with_alpha(-1).alpha == 0.0


def test_hex_alpha_round_trip():
    """An alpha byte survives hex formatting up to 2 decimals."""
    c = Color.from_string("#11223380")
    assert c.alpha == 0.5
    assert c.hex == "#11223380"
    assert Color.from_string(c.hex) == c


def test_opaque_hex_has_no_alpha_byte():
    assert Color(17, 34, 51).with_alpha(1.0).hex == "#112233"


def test_only_rgba_mode_carries_alpha():
    c = Color(255, 0, 0, 0.4)
    assert c.mode("rgba") == [255.0, 0.0, 0.0, 0.4]
    assert len(c.mode("hsl")) == 3
    assert Color.from_mode(c.mode("hsl"), "hsl").alpha == 1.0
