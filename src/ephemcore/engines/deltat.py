"""
ephemcore.engines.deltat
------------------------
ΔT (TT - UT) models bridging civil earth-rotation time and uniform dynamical time.

*** TIME COORDINATE NOTE ***
Models here take `ut`, the civil day count since 2000-01-01T12:00Z (J2000),
and return seconds. Use `terrestrial_time()` / `universal_time()` to convert
day counts; `Instant` does this for you.

The active model is process-wide. It starts as the model named by the
EPHEMCORE_DELTAT_MODEL environment variable ("espenak-meeus" when unset)
and can be swapped with `set_delta_t_model()`. Instants already created keep
the TT value computed when they were built.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol

from ..core.errors import InvalidArgumentError, NoConvergeError
from ..reference.deltat import delta_t_em2006, delta_t_seconds as reference_delta_t_seconds
from ..reference.time_scales import decimal_year

logger = logging.getLogger(__name__)

MODEL_ENV_VAR = "EPHEMCORE_DELTAT_MODEL"
DEFAULT_MODEL = "espenak-meeus"

_UT_ITER_LIMIT = 20
_UT_TOLERANCE_DAYS = 1.0e-12


class DeltaTModel(Protocol):
    """ΔT = TT - UT, in seconds."""

    def delta_t_seconds(self, ut: float) -> float:
        """
        Input `ut` MUST be civil days since J2000.
        """
        ...

    def info(self) -> Dict[str, object]: ...


# ============================================================
# Models
# ============================================================

@dataclass(frozen=True)
class EspenakMeeusDeltaT:
    """NASA Five Millennium Canon polynomials; defined for every finite input."""

    def delta_t_seconds(self, ut: float) -> float:
        return delta_t_em2006(decimal_year(ut))

    def info(self) -> Dict[str, object]:
        return {"type": "espenak-meeus"}


@dataclass(frozen=True)
class ConstantDeltaT:
    value: float

    def delta_t_seconds(self, ut: float) -> float:
        return float(self.value)

    def info(self) -> Dict[str, object]:
        return {"type": "constant", "value": self.value}


@dataclass(frozen=True)
class QuadraticDeltaT:
    """
    ΔT(year) = a + b*u + c*u^2, where u=(year-y0)/100.
    """
    a: float
    b: float
    c: float
    y0: float = 1820.0

    def delta_t_seconds(self, ut: float) -> float:
        u = (decimal_year(ut) - self.y0) / 100.0
        return self.a + u * (self.b + u * self.c)

    def info(self) -> Dict[str, object]:
        return {"type": "quadratic", "a": self.a, "b": self.b, "c": self.c, "y0": self.y0}


@dataclass(frozen=True)
class TableDeltaT:
    """Observed ΔT table where configured, Espenak–Meeus elsewhere."""
    blend_years: float = 30.0

    def delta_t_seconds(self, ut: float) -> float:
        return reference_delta_t_seconds(decimal_year(ut), method="best", blend_years=self.blend_years)

    def info(self) -> Dict[str, object]:
        return {"type": "table", "blend_years": self.blend_years}


# ============================================================
# Registry
# ============================================================

ModelFactory = Callable[[str], DeltaTModel]


@dataclass
class DeltaTRegistry:
    """Named factories; each receives the text after ``name:`` (may be empty)."""
    _factories: Dict[str, ModelFactory]

    def get(self, name: str) -> ModelFactory:
        if name not in self._factories:
            raise KeyError(f"Unknown ΔT model '{name}'. Available: {sorted(self._factories)}")
        return self._factories[name]

    def list(self) -> List[str]:
        return sorted(self._factories.keys())

    def register(self, name: str, factory: ModelFactory, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._factories):
            raise KeyError(f"ΔT model '{name}' already exists. Use overwrite=True to replace.")
        self._factories[name] = factory


def _constant_factory(arg: str) -> DeltaTModel:
    if not arg:
        raise InvalidArgumentError("constant ΔT model needs a value, e.g. 'constant:69.2'")
    return ConstantDeltaT(float(arg))


DELTA_T_MODELS = DeltaTRegistry({
    "espenak-meeus": lambda arg: EspenakMeeusDeltaT(),
    "table": lambda arg: TableDeltaT(float(arg)) if arg else TableDeltaT(),
    "constant": _constant_factory,
})


def register_delta_t_model(name: str, factory: ModelFactory, *, overwrite: bool = False) -> None:
    DELTA_T_MODELS.register(name, factory, overwrite=overwrite)


def make_delta_t_model(spec: str) -> DeltaTModel:
    """Build a model from ``"name"`` or ``"name:argument"``."""
    name, _, arg = spec.strip().partition(":")
    return DELTA_T_MODELS.get(name.strip().lower())(arg.strip())


# ============================================================
# Active model
# ============================================================

_lock = threading.Lock()
_active: Optional[DeltaTModel] = None


def get_delta_t_model() -> DeltaTModel:
    global _active
    model = _active
    if model is None:
        with _lock:
            if _active is None:
                spec = os.environ.get(MODEL_ENV_VAR, "").strip() or DEFAULT_MODEL
                _active = make_delta_t_model(spec)
                logger.debug("ΔT model from environment: %s", _active.info())
            model = _active
    return model


def set_delta_t_model(model: Optional[DeltaTModel]) -> Optional[DeltaTModel]:
    """
    Install `model` as the active ΔT model and return the previous one.
    Passing None resets to the environment/default model on next use.
    """
    global _active
    with _lock:
        previous, _active = _active, model
    if model is not None:
        logger.info("ΔT model set to %s", model.info())
    return previous


def delta_t_seconds(ut: float) -> float:
    return get_delta_t_model().delta_t_seconds(ut)


# ============================================================
# Day-count conversions
# ============================================================

def terrestrial_time(ut: float, model: Optional[DeltaTModel] = None) -> float:
    m = model or get_delta_t_model()
    return ut + m.delta_t_seconds(ut) / 86400.0


def universal_time(tt: float, model: Optional[DeltaTModel] = None) -> float:
    """
    Inverse of `terrestrial_time` by fixed-point iteration. The relation is
    nearly linear, so this settles in about three passes.
    """
    m = model or get_delta_t_model()
    dt = terrestrial_time(tt, m) - tt
    for _ in range(_UT_ITER_LIMIT):
        ut = tt - dt
        err = terrestrial_time(ut, m) - tt
        if abs(err) < _UT_TOLERANCE_DAYS:
            return ut
        dt += err
    raise NoConvergeError(f"TT -> UT did not converge for tt={tt}")
