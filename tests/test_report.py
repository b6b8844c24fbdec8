from safecracker.layer import HOLE, Layer, Safe
from safecracker.report import format_layer, format_solution


def make_safe():
    top = Layer([1, 2], [HOLE, 12], rotation=1)
    bottom = Layer([30, 4], [5, HOLE])
    return Safe([top, bottom], columns=2, target=0)


def test_format_layer_pads_single_digits():
    safe = Safe([Layer([0, 0], [5, 12])], columns=2, target=0)
    assert format_layer(safe, 0) == " 5  12  "


def test_format_layer_fills_hole_from_next_layer():
    safe = make_safe()
    top, bottom = safe.layers
    rendered = format_layer(safe, 0)
    assert rendered.split() == [str(top.inner_at(0)), str(bottom.outer_at(1))]


def test_hole_in_last_layer_shows_zero():
    safe = Safe([Layer([9], [HOLE])], columns=1, target=0)
    assert format_layer(safe, 0).split() == ["0"]


def test_negative_single_digit_is_padded():
    safe = Safe([Layer([0], [-5])], columns=1, target=0)
    assert format_layer(safe, 0).startswith(" -5")


def test_format_solution_structure():
    safe = make_safe()
    text = format_solution(safe)
    expected_rows = format_layer(safe, 0) + "\n" + format_layer(safe, 1) + "\n"
    assert text.startswith(expected_rows)
    assert text.endswith("\n\n")
    rotations = [line for line in text.splitlines() if line.startswith("Layer rotation: ")]
    assert rotations == [
        f"Layer rotation: {layer.rotation}" for layer in safe.layers
    ]