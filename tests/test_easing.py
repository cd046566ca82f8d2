import pytest

from gameengine import easing
from gameengine.easing import Ease, ease

ALL_KINDS = list(Ease)

PAIRS = [
    (Ease.IN_SINE, Ease.OUT_SINE),
    (Ease.IN_QUAD, Ease.OUT_QUAD),
    (Ease.IN_CUBIC, Ease.OUT_CUBIC),
    (Ease.IN_QUART, Ease.OUT_QUART),
    (Ease.IN_QUINT, Ease.OUT_QUINT),
    (Ease.IN_EXPO, Ease.OUT_EXPO),
    (Ease.IN_CIRC, Ease.OUT_CIRC),
    (Ease.IN_BACK, Ease.OUT_BACK),
    (Ease.IN_BOUNCE, Ease.OUT_BOUNCE),
]

IN_OUT = [
    Ease.IN_OUT_SINE,
    Ease.IN_OUT_QUAD,
    Ease.IN_OUT_CUBIC,
    Ease.IN_OUT_QUART,
    Ease.IN_OUT_QUINT,
    Ease.IN_OUT_EXPO,
    Ease.IN_OUT_CIRC,
    Ease.IN_OUT_BACK,
    Ease.IN_OUT_ELASTIC,
    Ease.IN_OUT_BOUNCE,
]


def test_every_kind_has_a_curve():
    assert len(ALL_KINDS) == 30
    assert len({kind.function for kind in ALL_KINDS}) == 30
    for kind in ALL_KINDS:
        assert ease(kind, 0.0, 1.0, 0.37) == pytest.approx(kind.function(0.37))


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_curves_fix_endpoints(kind):
    assert ease(kind, 0.0, 1.0, 0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease(kind, 0.0, 1.0, 1.0) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_ease_hits_start_and_end(kind):
    assert ease(kind, 10.0, 30.0, 0.0) == pytest.approx(10.0, abs=1e-9)
    assert ease(kind, 10.0, 30.0, 1.0) == pytest.approx(30.0, abs=1e-9)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_ease_from_zero_to_one_is_the_curve(kind):
    for x in (0.1, 0.35, 0.6, 0.9):
        assert ease(kind, 0.0, 1.0, x) == pytest.approx(kind.function(x))


@pytest.mark.parametrize("kind", IN_OUT)
def test_in_out_curves_pass_through_half(kind):
    assert ease(kind, 0.0, 1.0, 0.5) == pytest.approx(0.5, abs=1e-9)


@pytest.mark.parametrize("kind_in, kind_out", PAIRS)
def test_out_mirrors_in(kind_in, kind_out):
    for x in (0.0, 0.2, 0.45, 0.7, 0.95, 1.0):
        assert ease(kind_out, 0.0, 1.0, x) == pytest.approx(
            1 - ease(kind_in, 0.0, 1.0, 1 - x), abs=1e-9
        )


@pytest.mark.parametrize(
    "fn",
    [
        easing.ease_in_quad,
        easing.ease_in_cubic,
        easing.ease_out_quad,
        easing.ease_in_out_quint,
        easing.ease_in_sine,
        easing.ease_out_circ,
        easing.ease_in_out_expo,
    ],
)
def test_monotone_curves_increase(fn):
    samples = [fn(i / 20) for i in range(21)]
    assert samples == sorted(samples)


def test_back_overshoots_below_zero():
    assert easing.ease_in_back(0.3) < 0.0
    assert easing.ease_out_back(0.7) > 1.0


def test_ease_reversed_range():
    assert ease(Ease.IN_QUAD, 5.0, -5.0, 1.0) == pytest.approx(-5.0)
    assert ease(Ease.IN_QUAD, 5.0, -5.0, 0.5) == pytest.approx(
        5.0 - 10.0 * easing.ease_in_quad(0.5)
    )


def test_bounce_segments_are_continuous():
    d1 = 2.75
    for edge in (1 / d1, 2 / d1, 2.5 / d1):
        assert easing.ease_out_bounce(edge - 1e-9) == pytest.approx(
            easing.ease_out_bounce(edge), abs=1e-6
        )