import numpy as np
import pytest
import os,sys
try:
    from glassflow.regression import *
except ImportError:
    # Add the next directory up to the path if glassflow not in it
    sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
    from glassflow.regression import *
from glassflow.coefficients import VISCOSITY_MODEL
from glassflow.oxides import OXIDE_INDEX, Composition, normalize_composition

TABLE = {
    "1": {"Constant": 100.0, "SiO2": 2.0, "Na2O^2": 0.5, "SiO2*Na2O": 0.1, "SiO2*Na2O*CaO": 0.01},
}
COMP = {"SiO2": 70.0, "Na2O": 20.0, "CaO": 10.0}


def test_parse_term_variants():
    assert parse_term("Constant") == Constant()
    assert parse_term("Na2O") == Single(OXIDE_INDEX["Na2O"])
    assert parse_term("B2O3^2") == Power(OXIDE_INDEX["B2O3"], 2)
    assert parse_term("Al2O3*Na2O") == Product((OXIDE_INDEX["Al2O3"], OXIDE_INDEX["Na2O"]))
    assert isinstance(parse_term("Al2O3*Na2O*CaO"), Product)


MALFORMED_TERMS = [
    "Al2O3*Na2O*CaO*MgO",   # arity above three
    "Al2O3*",               # empty factor
    "Kryptonite",
    "B2O3^x",
    "B2O3^0",
    "Xx^2",
]

@pytest.mark.parametrize("term", MALFORMED_TERMS)
def test_parse_term_rejects_malformed(term):
    with pytest.raises(ValueError):
        parse_term(term)


def test_bundled_table_parses():
    mdl = default_model()
    assert set(mdl.scales) == {"1.5", "6.6", "12"}
    assert all(len(mdl.scales[s]) == len(VISCOSITY_MODEL[s]) for s in mdl.scales)
    assert default_model() is mdl


def test_evaluate_custom_table():
    mdl = load_model(TABLE)
    # 100 + 2*70 + 0.5*20² + 0.1*70*20 + 0.01*70*20*10
    assert predict_iso_temp("1", COMP, model=mdl) == pytest.approx(720.0)
    assert predict_iso_temp("1", Composition.from_mapping(COMP), model=mdl) == pytest.approx(720.0)


def test_incomplete_composition_is_total():
    mdl = load_model(TABLE)
    assert predict_iso_temp("1", {}, model=mdl) == pytest.approx(100.0)
    # CaO missing -> triple product vanishes
    assert predict_iso_temp("1", {"SiO2": 70.0, "Na2O": 20.0}, model=mdl) == pytest.approx(580.0)


def test_non_finite_mapping_values_count_as_zero():
    mdl = load_model(TABLE)
    # NaN and negative entries are ignored like blank fields
    assert predict_iso_temp("1", {"SiO2": np.nan, "Na2O": 20.0}, model=mdl) == pytest.approx(300.0)
    assert predict_iso_temp("1", {"SiO2": -5.0, "Na2O": 20.0, "CaO": np.inf}, model=mdl) == pytest.approx(300.0)
    assert np.isfinite(predict_iso_temp("1.5", {"SiO2": np.nan, "Na2O": 20.0}))


def test_unknown_scale():
    with pytest.raises(ValueError):
        predict_iso_temp("3.3", COMP)


def test_soda_lime_iso_temps():
    comp = normalize_composition({"SiO2": 70.0, "Na2O": 15.0, "CaO": 10.0, "Al2O3": 5.0}, unit="mol")
    t15 = predict_iso_temp("1.5", comp)
    t66 = predict_iso_temp("6.6", comp)
    t12 = predict_iso_temp("12", comp)
    assert t15 == pytest.approx(1415.6)
    assert t66 == pytest.approx(753.75)
    assert t12 == pytest.approx(582.225)
    assert t15 > t66 > t12

def test_all():
    test_parse_term_variants()
    for term in MALFORMED_TERMS:
        test_parse_term_rejects_malformed(term)
    test_bundled_table_parses()
    test_evaluate_custom_table()
    test_incomplete_composition_is_total()
    test_non_finite_mapping_values_count_as_zero()
    test_unknown_scale()
    test_soda_lime_iso_temps()
    print("test_glassflow_regression passed all tests")

if __name__=="__main__":
    test_all()
