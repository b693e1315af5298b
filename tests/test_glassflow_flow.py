import numpy as np
import pytest
import os,sys
try:
    from glassflow.parameters import *
except ImportError:
    # Add the next directory up to the path if glassflow not in it
    sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
    from glassflow.parameters import *
from glassflow.flow import (FlowResult, RECT_CORRECTION, annulus_flow, circle_flow,
                            ellipse_flow, rectangle_flow, solve_flow)

SODA = FluidProperties(density=2500.0, viscosity=1000.0)
SHAPES = [
    Circle(10.0),
    Rectangle(12.0, 5.0),
    Ellipse(12.0, 8.0),
    Annulus(12.0, 5.0),
]


def test_circle_matches_hagen_poiseuille():
    """d = 10 mm, L = 100 mm, ρ = 2500, μ = 1000, 500 mm head."""
    out = solve_flow(SODA, Circle(10.0), Gravity(500.0), 100.0)
    r, L = 0.005, 0.1
    dp = 2500.0 * 9.81 * 0.5
    Q = np.pi * r**4 * dp / (8 * 1000.0 * L)
    assert out.volume_flow_m3_per_s == pytest.approx(Q, rel=1e-12)
    assert out.mass_flow_kg_per_hr == pytest.approx(Q * 2500.0 * 3600.0, rel=1e-12)
    assert out.velocity_m_per_s == pytest.approx(Q / (np.pi * r**2), rel=1e-12)


def test_rectangle_correction_and_symmetry():
    a, b, dp, mu, L = 0.02, 0.004, 1e5, 10.0, 0.05
    expected = a * b**3 * dp / (12 * mu * L) * (1 - 0.630 * b / a)
    assert RECT_CORRECTION == 0.630
    assert rectangle_flow(a, b, dp, mu, L) == pytest.approx(expected)

    wide = solve_flow(SODA, Rectangle(20.0, 4.0), Applied(0.5), 50.0)
    tall = solve_flow(SODA, Rectangle(4.0, 20.0), Applied(0.5), 50.0)
    assert wide == tall
    assert wide.velocity_m_per_s == pytest.approx(wide.volume_flow_m3_per_s / (0.02 * 0.004))


def test_round_ellipse_is_a_circle():
    c = solve_flow(SODA, Circle(8.0), Applied(1.0), 200.0)
    e = solve_flow(SODA, Ellipse(8.0, 8.0), Applied(1.0), 200.0)
    assert e.volume_flow_m3_per_s == pytest.approx(c.volume_flow_m3_per_s, rel=1e-12)
    assert e.velocity_m_per_s == pytest.approx(c.velocity_m_per_s, rel=1e-12)
    assert ellipse_flow(0.004, 0.004, 1e5, 1.0, 1.0) == pytest.approx(circle_flow(0.004, 1e5, 1.0, 1.0))


def test_annulus_closed_form():
    R, r, dp, mu, L = 0.006, 0.0025, 2e4, 1000.0, 0.1
    K = r / R
    expected = np.pi * dp * R**4 / (8 * mu * L) * ((1 - K**4) - (1 - K**2)**2 / np.log(1 / K))
    assert annulus_flow(R, r, dp, mu, L) == pytest.approx(expected)
    out = solve_flow(SODA, Annulus(12.0, 5.0), Applied(0.2), 100.0)
    assert out.volume_flow_m3_per_s == pytest.approx(expected)
    assert out.velocity_m_per_s == pytest.approx(expected / (np.pi * (R**2 - r**2)))


def test_annulus_without_core_is_a_circle():
    a = solve_flow(SODA, Annulus(10.0, 0.0), Gravity(300.0), 100.0)
    c = solve_flow(SODA, Circle(10.0), Gravity(300.0), 100.0)
    assert a.volume_flow_m3_per_s == pytest.approx(c.volume_flow_m3_per_s)
    # a thin core always reduces the flow
    thin = solve_flow(SODA, Annulus(10.0, 0.5), Gravity(300.0), 100.0)
    assert 0.0 < thin.volume_flow_m3_per_s < c.volume_flow_m3_per_s


def test_gravity_and_applied_agree():
    head = 750.0
    bar = SODA.density * 9.81 * head / 1000.0 / 1e5
    for shape in SHAPES:
        g = solve_flow(SODA, shape, Gravity(head), 120.0)
        p = solve_flow(SODA, shape, Applied(bar), 120.0)
        assert g.volume_flow_m3_per_s == pytest.approx(p.volume_flow_m3_per_s)


@pytest.mark.parametrize("shape", SHAPES)
def test_monotonic_in_pressure_length_and_viscosity(shape):
    q = lambda fluid, p, L: solve_flow(fluid, shape, p, L).mass_flow_kg_per_hr
    flows = [q(SODA, Applied(b), 100.0) for b in (0.1, 0.5, 1.0, 5.0)]
    assert all(x < y for x, y in zip(flows, flows[1:]))
    flows = [q(SODA, Applied(1.0), L) for L in (10.0, 50.0, 100.0, 500.0)]
    assert all(x > y for x, y in zip(flows, flows[1:]))
    flows = [q(FluidProperties(2500.0, mu), Applied(1.0), 100.0) for mu in (1.0, 10.0, 1e3, 1e5)]
    assert all(x > y for x, y in zip(flows, flows[1:]))


DEGENERATE_CASES = [
    (FluidProperties(0.0, 1000.0), Circle(10.0), Applied(1.0), 100.0),
    (FluidProperties(2500.0, 0.0), Circle(10.0), Applied(1.0), 100.0),
    (FluidProperties(2500.0, -5.0), Circle(10.0), Applied(1.0), 100.0),
    (SODA, Circle(10.0), Applied(1.0), 0.0),
    (SODA, Circle(10.0), Applied(1.0), np.nan),
    (SODA, Circle(10.0), Gravity(0.0), 100.0),
    (SODA, Circle(10.0), Applied(-2.0), 100.0),
    (SODA, Circle(0.0), Applied(1.0), 100.0),
    (SODA, Rectangle(0.0, 5.0), Applied(1.0), 100.0),
    (SODA, Ellipse(10.0, -1.0), Applied(1.0), 100.0),
    (SODA, Annulus(10.0, 10.0), Applied(1.0), 100.0),
    (SODA, Annulus(10.0, 12.0), Applied(1.0), 100.0),
    (SODA, Annulus(0.0, 0.0), Applied(1.0), 100.0),
]

@pytest.mark.parametrize("fluid, shape, pressure, length", DEGENERATE_CASES)
def test_degenerate_input_gives_zero_flow(fluid, shape, pressure, length):
    assert solve_flow(fluid, shape, pressure, length) == FlowResult.zero()


def test_unknown_types_are_rejected():
    with pytest.raises(TypeError):
        solve_flow(SODA, "circle", Applied(1.0), 100.0)
    with pytest.raises(TypeError):
        solve_flow(SODA, Circle(10.0), 1.0, 100.0)

def test_all():
    test_circle_matches_hagen_poiseuille()
    test_rectangle_correction_and_symmetry()
    test_round_ellipse_is_a_circle()
    test_annulus_closed_form()
    test_annulus_without_core_is_a_circle()
    test_gravity_and_applied_agree()
    for case in DEGENERATE_CASES:
        test_degenerate_input_gives_zero_flow(*case)
    for shape in SHAPES:
        test_monotonic_in_pressure_length_and_viscosity(shape)
    test_unknown_types_are_rejected()
    print("test_glassflow_flow passed all tests")

if __name__=="__main__":
    test_all()
