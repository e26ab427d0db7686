# tests/test_deltat.py

import pytest
from unittest.mock import patch

from ephemcore import Instant, InvalidArgumentError
from ephemcore.engines import deltat
from ephemcore.reference import deltat as ref


@pytest.fixture
def restore_model():
    previous = deltat.set_delta_t_model(None)
    yield
    deltat.set_delta_t_model(previous)


@pytest.fixture
def no_observed_table():
    ref.load_observed_table.cache_clear()
    with patch("ephemcore.reference.deltat.load_observed_table", return_value=None):
        yield
    ref.load_observed_table.cache_clear()


def test_espenak_meeus_reference_values():
    # published Espenak–Meeus values (seconds)
    assert ref.delta_t_em2006(1900.0) == pytest.approx(-2.79, abs=0.01)
    assert ref.delta_t_em2006(2000.0) == pytest.approx(63.86, abs=0.01)
    assert ref.delta_t_em2006(1820.0) == pytest.approx(12.0, abs=1.0)


def test_long_term_parabola_outside_polynomials():
    for y in (-2000.0, 3000.0):
        u = (y - 1820.0) / 100.0
        assert ref.delta_t_em2006(y) == pytest.approx(-20.0 + 32.0 * u * u)


def test_registry_lists_builtin_models():
    names = deltat.DELTA_T_MODELS.list()
    assert {"espenak-meeus", "table", "constant"} <= set(names)
    with pytest.raises(KeyError):
        deltat.DELTA_T_MODELS.get("no-such-model")


def test_register_refuses_overwrite():
    with pytest.raises(KeyError):
        deltat.register_delta_t_model("constant", lambda arg: deltat.ConstantDeltaT(0.0))


def test_make_constant_model():
    m = deltat.make_delta_t_model("constant:69.2")
    assert m.delta_t_seconds(12345.0) == 69.2
    with pytest.raises(InvalidArgumentError):
        deltat.make_delta_t_model("constant")


def test_set_model_changes_instants(restore_model):
    deltat.set_delta_t_model(deltat.ConstantDeltaT(0.0))
    t = Instant.from_ut(100.0)
    assert t.tt == t.ut
    deltat.set_delta_t_model(deltat.ConstantDeltaT(86400.0))
    assert Instant.from_ut(100.0).tt == pytest.approx(101.0)


def test_model_from_environment(restore_model):
    with patch.dict("os.environ", {deltat.MODEL_ENV_VAR: "constant:32.184"}):
        deltat.set_delta_t_model(None)
        assert deltat.delta_t_seconds(0.0) == pytest.approx(32.184)


def test_table_model_falls_back_to_polynomial(no_observed_table):
    m = deltat.TableDeltaT()
    em = deltat.EspenakMeeusDeltaT()
    for ut in (-50000.0, 0.0, 20000.0):
        assert m.delta_t_seconds(ut) == pytest.approx(em.delta_t_seconds(ut))


def test_observed_table_from_csv(tmp_path):
    csv_path = tmp_path / "deltat.csv"
    csv_path.write_text("decimal_year,delta_t_seconds\n1990.0,56.86\n2000.0,63.83\n2010.0,66.07\n", encoding="utf-8")
    ref.load_observed_table.cache_clear()
    try:
        with patch.dict("os.environ", {ref.TABLE_ENV_VAR: str(csv_path)}):
            tbl = ref.load_observed_table()
            assert tbl is not None
            assert len(tbl) == 3
            assert tbl.eval(1995.0) == pytest.approx((56.86 + 63.83) / 2)
            assert ref.delta_t_seconds(2005.0, method="table") == pytest.approx((63.83 + 66.07) / 2)
    finally:
        ref.load_observed_table.cache_clear()


def test_bad_method_rejected():
    with pytest.raises(ValueError):
        ref.delta_t_seconds(2000.0, method="guess")


def test_table_rejects_unordered_years():
    with pytest.raises(ValueError):
        ref.table_from_rows([{"decimal_year": "2000", "delta_t_seconds": "63.8"},
                             {"decimal_year": "1990", "delta_t_seconds": "56.9"}])


def test_best_method_fades_table_offset():
    tbl = ref.DeltaTTable((1990.0, 2000.0), (60.0, 70.0))
    offset = 70.0 - ref.delta_t_em2006(2000.0)
    with patch("ephemcore.reference.deltat.load_observed_table", return_value=tbl):
        assert ref.delta_t_seconds(1995.0) == pytest.approx(65.0)
        assert ref.delta_t_seconds(2015.0) == pytest.approx(ref.delta_t_em2006(2015.0) + 0.5 * offset)
        assert ref.delta_t_seconds(2040.0) == pytest.approx(ref.delta_t_em2006(2040.0))
        assert ref.delta_t_seconds(1900.0) == pytest.approx(ref.delta_t_em2006(1900.0))
