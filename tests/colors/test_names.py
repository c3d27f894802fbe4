from chromalite import Color, W3CX11
from chromalite.data import hex_for_name, name_for_hex

def test_table():
    assert len(W3CX11) == 154
    assert W3CX11["mediumspringgreen"] == "#00fa9a"
    for name, code in W3CX11.items():
        assert name == name.lower()
        assert len(code) == 7 and code.startswith("#")

def test_name_view():
    assert Color(0, 250, 154).name == "mediumspringgreen"
    assert Color.from_string("#ff0000").name == "red"

def test_name_falls_back_to_hex():
    assert Color(1, 2, 3).name == "#010203"
    assert Color(255, 0, 0, 0.5).name == "#ff000080"

def test_shared_codes_return_first_name():
    assert name_for_hex("#00ffff") == "aqua"
    assert name_for_hex("#ff00ff") == "fuchsia"
    assert name_for_hex("#808080") == "gray"
    assert Color.from_string("cyan").name == "aqua"

def test_lookup_ignores_case_and_whitespace():
    assert hex_for_name(" Medium Spring Green ") == "#00fa9a"
    assert hex_for_name("nope") is None
    assert name_for_hex("#00FA9A") == "mediumspringgreen"
