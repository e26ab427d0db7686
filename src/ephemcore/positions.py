"""
ephemcore.positions
-------------------
Body positions and states in EQJ (J2000 mean equator), plus the observer
pipeline: light-travel correction, topocentric equatorial coordinates,
observer vectors and ecliptic helpers.

All vectors are in au and tagged with the Instant they are valid for.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from .core.angles import normalize_longitude
from .core.bodies import Body
from .core.constants import C_AUDAY, EARTH_MOON_MASS_RATIO
from .core.errors import EarthNotAllowedError, InvalidBodyError, NoConvergeError
from .core.time import Instant
from .core.types import EclipticCoordinates, Equatorial, Observer, Spherical, StateVector, Vector
from .engines import gravsim, jupiter_moons as jm, lunar, vsop
from .engines._vec3 import BodyState, Vec3
from .frames.coords import angle_between, ecliptic, rotate_equatorial_to_ecliptic, vector_to_radec
from .frames.earth import geo_pos, inverse_terra, sidereal_time, terra, terra_posvel
from .frames.matrix import PrecessDirection, rotate_state, rotate_xyz
from .frames.nutation import earth_tilt, ecliptic_to_equatorial_of_date, nutation_rotation
from .frames.precession import precession_rotation

PositionFunc = Callable[[Instant], Vector]

LIGHT_TRAVEL_ITER_LIMIT = 10

# half-width of the symmetric difference used for lunar velocity, days
_MOON_VELOCITY_DT = 1.0e-5


def _vector(v: Vec3, time: Instant) -> Vector:
    return Vector(v.x, v.y, v.z, time)


def _state(s: BodyState, time: Instant) -> StateVector:
    return StateVector(s.r.x, s.r.y, s.r.z, s.v.x, s.v.y, s.v.z, time)


def _is_vsop_body(body: Body) -> bool:
    return isinstance(body, Body) and Body.MERCURY.value <= body.value <= Body.NEPTUNE.value


def _to_j2000(time: Instant, xyz):
    """True equator of date -> EQJ."""
    xyz = rotate_xyz(nutation_rotation(time, PrecessDirection.INTO_2000), xyz)
    return rotate_xyz(precession_rotation(time, PrecessDirection.INTO_2000), xyz)


def _to_of_date(time: Instant, xyz):
    """EQJ -> true equator of date."""
    xyz = rotate_xyz(precession_rotation(time, PrecessDirection.FROM_2000), xyz)
    return rotate_xyz(nutation_rotation(time, PrecessDirection.FROM_2000), xyz)


# ============================================================
# Moon
# ============================================================

def geo_moon(time: Instant) -> Vector:
    """Geocentric Moon in EQJ, without light-travel correction."""
    m = lunar.calc_moon(time.tt)
    mpos = ecliptic_to_equatorial_of_date(time.tt, lunar.ecliptic_rect(m))
    x, y, z = rotate_xyz(precession_rotation(time, PrecessDirection.INTO_2000), mpos)
    return Vector(x, y, z, time)


def ecliptic_geo_moon(time: Instant) -> Spherical:
    """Geocentric Moon in ecliptic-of-date coordinates (degrees, au)."""
    m = lunar.calc_moon(time.tt)
    return Spherical(math.degrees(m.lat), math.degrees(m.lon), m.distance_au)


def geo_moon_state(time: Instant) -> StateVector:
    dt = _MOON_VELOCITY_DT
    r1 = geo_moon(time.add_days(-dt))
    r2 = geo_moon(time.add_days(+dt))
    return StateVector(
        (r1.x + r2.x) / 2, (r1.y + r2.y) / 2, (r1.z + r2.z) / 2,
        (r2.x - r1.x) / (2 * dt), (r2.y - r1.y) / (2 * dt), (r2.z - r1.z) / (2 * dt),
        time,
    )


def geo_emb_state(time: Instant) -> StateVector:
    """Geocentric Earth/Moon barycenter."""
    s = geo_moon_state(time)
    d = 1.0 + EARTH_MOON_MASS_RATIO
    return StateVector(s.x / d, s.y / d, s.z / d, s.vx / d, s.vy / d, s.vz / d, time)


def libration(time: Instant) -> lunar.LibrationInfo:
    return lunar.libration(time.tt)


# ============================================================
# Heliocentric / barycentric
# ============================================================

def helio_vector(body: Body, time: Instant) -> Vector:
    if body == Body.PLUTO:
        return _vector(gravsim.pluto_state(time.tt, True).r, time)
    if _is_vsop_body(body):
        return _vector(vsop.helio_position(body, time.tt), time)
    if body == Body.SUN:
        return Vector(0.0, 0.0, 0.0, time)
    if body == Body.MOON:
        return _vector(vsop.helio_position(Body.EARTH, time.tt), time) + geo_moon(time)
    if body == Body.EMB:
        e = _vector(vsop.helio_position(Body.EARTH, time.tt), time)
        return e + geo_moon(time) / (1.0 + EARTH_MOON_MASS_RATIO)
    if body == Body.SSB:
        return _vector(gravsim.solar_system_barycenter(time.tt), time)
    raise InvalidBodyError(body)


def helio_distance(body: Body, time: Instant) -> float:
    if body == Body.SUN:
        return 0.0
    if _is_vsop_body(body):
        return vsop.helio_distance(body, time.tt)
    return helio_vector(body, time).length()


def bary_state(body: Body, time: Instant) -> StateVector:
    """Position and velocity relative to the Solar System barycenter."""
    if body == Body.SSB:
        return StateVector(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, time)
    if body == Body.PLUTO:
        return _state(gravsim.pluto_state(time.tt, False), time)

    bary = gravsim.MajorBodies(time.tt)
    if body == Body.SUN:
        return _state(bary.sun, time)
    if body in bary.states:
        return _state(bary.states[body], time)

    sun = _state(bary.sun, time)
    if body in (Body.MOON, Body.EMB):
        earth = _state(vsop.helio_state(Body.EARTH, time.tt), time)
        geo = geo_moon_state(time) if body == Body.MOON else geo_emb_state(time)
        return geo + sun + earth
    if _is_vsop_body(body):
        return sun + _state(vsop.helio_state(body, time.tt), time)
    raise InvalidBodyError(body)


def helio_state(body: Body, time: Instant) -> StateVector:
    """Position and velocity relative to the Sun's center."""
    if body == Body.SUN:
        return StateVector(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, time)
    if body == Body.SSB:
        return -_state(gravsim.MajorBodies(time.tt).sun, time)
    if _is_vsop_body(body):
        return _state(vsop.helio_state(body, time.tt), time)
    if body == Body.PLUTO:
        return _state(gravsim.pluto_state(time.tt, True), time)
    if body in (Body.MOON, Body.EMB):
        earth = _state(vsop.helio_state(Body.EARTH, time.tt), time)
        geo = geo_moon_state(time) if body == Body.MOON else geo_emb_state(time)
        return geo + earth
    raise InvalidBodyError(body)


# ============================================================
# Light travel
# ============================================================

def correct_light_travel(func: PositionFunc, time: Instant) -> Vector:
    """
    Iterate `func` backwards in time until the light-travel delay to the
    returned vector settles below 1e-9 day.
    """
    ltime = time
    for _ in range(LIGHT_TRAVEL_ITER_LIMIT):
        pos = func(ltime)
        ltime2 = time.add_days(-pos.length() / C_AUDAY)
        if abs(ltime2.tt - ltime.tt) < 1.0e-9:
            return pos
        ltime = ltime2
    raise NoConvergeError("Light travel time correction did not converge")


def backdate_position(time: Instant, observer_body: Body, target_body: Body, aberration: bool) -> Vector:
    """
    Apparent position of `target_body` as seen from `observer_body`.

    With `aberration`, the observer is backdated along with the target,
    which approximates stellar aberration for Solar System distances.
    """
    if aberration:
        def position(t: Instant) -> Vector:
            return helio_vector(target_body, t) - helio_vector(observer_body, t)
    else:
        observer_pos = helio_vector(observer_body, time)

        def position(t: Instant) -> Vector:
            return helio_vector(target_body, t) - observer_pos.with_time(t)

    return correct_light_travel(position, time)


def geo_vector(body: Body, time: Instant, aberration: bool) -> Vector:
    """
    Geocentric EQJ vector of `body`, light-travel corrected. The result is
    tagged with the observation time, not the backdated one.
    """
    if body == Body.MOON:
        return geo_moon(time)
    if body == Body.EARTH:
        return Vector(0.0, 0.0, 0.0, time)
    return backdate_position(time, Body.EARTH, body, aberration).with_time(time)


def equator(body: Body, time: Instant, observer: Observer, ofdate: bool, aberration: bool) -> Equatorial:
    """Topocentric RA/Dec, in EQJ or (with `ofdate`) the true equator of date."""
    gc_observer = geo_pos(time, observer)
    gc = geo_vector(body, time, aberration)
    j2000 = (gc.x - gc_observer[0], gc.y - gc_observer[1], gc.z - gc_observer[2])
    if not ofdate:
        return vector_to_radec(j2000, time)
    return vector_to_radec(_to_of_date(time, j2000), time)


# ============================================================
# Observer
# ============================================================

def observer_vector(time: Instant, observer: Observer, ofdate: bool) -> Vector:
    """Geocentric position of a surface observer."""
    ovec = terra(observer, sidereal_time(time))
    if not ofdate:
        ovec = _to_j2000(time, ovec)
    return Vector(ovec[0], ovec[1], ovec[2], time)


def observer_state(time: Instant, observer: Observer, ofdate: bool) -> StateVector:
    pos, vel = terra_posvel(observer, sidereal_time(time))
    state = StateVector(pos[0], pos[1], pos[2], vel[0], vel[1], vel[2], time)
    if not ofdate:
        state = rotate_state(nutation_rotation(time, PrecessDirection.INTO_2000), state)
        state = rotate_state(precession_rotation(time, PrecessDirection.INTO_2000), state)
    return state


def vector_observer(vector: Vector, ofdate: bool) -> Observer:
    """Geodetic location of the point at geocentric `vector`."""
    ovec = (vector.x, vector.y, vector.z)
    if not ofdate:
        ovec = _to_of_date(vector.t, ovec)
    return inverse_terra(ovec, sidereal_time(vector.t))


# ============================================================
# Ecliptic helpers
# ============================================================

def sun_position(time: Instant) -> EclipticCoordinates:
    """
    Apparent geocentric Sun in true ecliptic-of-date coordinates,
    corrected for light travel.
    """
    adjusted = time.add_days(-1.0 / C_AUDAY)
    earth = vsop.helio_position(Body.EARTH, adjusted.tt)
    sun_ofdate = _to_of_date(adjusted, (-earth.x, -earth.y, -earth.z))
    true_obliq = math.radians(earth_tilt(adjusted).tobl)
    return rotate_equatorial_to_ecliptic(sun_ofdate, true_obliq, time)


def ecliptic_longitude(body: Body, time: Instant) -> float:
    """Heliocentric J2000 ecliptic longitude in degrees."""
    if body == Body.SUN:
        raise InvalidBodyError(body)
    return ecliptic(helio_vector(body, time)).elon


def angle_from_sun(body: Body, time: Instant) -> float:
    """Angle in degrees between the Sun and `body` as seen from Earth."""
    if body == Body.EARTH:
        raise EarthNotAllowedError()
    sv = geo_vector(Body.SUN, time, True)
    bv = geo_vector(body, time, True)
    return angle_between(sv, bv)


def pair_longitude(body1: Body, body2: Body, time: Instant) -> float:
    """Geocentric ecliptic longitude of body1 minus that of body2, [0, 360)."""
    if body1 == Body.EARTH or body2 == Body.EARTH:
        raise EarthNotAllowedError()
    eclip1 = ecliptic(geo_vector(body1, time, False))
    eclip2 = ecliptic(geo_vector(body2, time, False))
    return normalize_longitude(eclip1.elon - eclip2.elon)


# ============================================================
# Jupiter's moons
# ============================================================

@dataclass(frozen=True)
class JupiterMoonsInfo:
    """Jupiter-centred EQJ states of the Galilean moons."""
    io: StateVector
    europa: StateVector
    ganymede: StateVector
    callisto: StateVector


def jupiter_moons(time: Instant) -> JupiterMoonsInfo:
    states = [_state(s, time) for _, s in jm.all_moon_states(time.tt)]
    return JupiterMoonsInfo(*states)
