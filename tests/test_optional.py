# tests/test_optional.py

import sys
from unittest.mock import patch

import pytest

from ephemcore.ephemeris import require_ephemeris


def test_require_ephemeris_gives_install_hint():
    with patch.dict(sys.modules, {"jplephem": None}):
        with pytest.raises(RuntimeError, match=r"ephemcore\[ephemeris\]"):
            require_ephemeris()


def test_plot_deltat_writes_png(tmp_path, monkeypatch):
    monkeypatch.setenv("MPLBACKEND", "Agg")
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    from ephemcore.diagnostics import plot_deltat

    out = tmp_path / "deltat.png"
    rc = plot_deltat.main(["--y0", "1900", "--y1", "1950", "--step", "5", "--model", "espenak-meeus",
                           "--model", "constant:60", "--out", str(out)])
    assert rc == 0
    assert out.exists()


def test_plot_deltat_rejects_reversed_range():
    from ephemcore.diagnostics import plot_deltat

    with pytest.raises(SystemExit):
        plot_deltat.main(["--y0", "2000", "--y1", "1900"])
