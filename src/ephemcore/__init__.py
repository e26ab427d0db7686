"""ephemcore public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .core.bodies import Body, body_code, mass_product, planet_orbital_period, synodic_period
from .core.constants import KM_PER_AU, C_AUDAY
from .core.errors import (
    BadVectorError,
    DateTimeFormatError,
    EarthNotAllowedError,
    EphemcoreError,
    InternalError,
    InvalidArgumentError,
    InvalidBodyError,
    NoConvergeError,
    TimeMismatchError,
)
from .core.time import Instant
from .core.types import (
    EclipticCoordinates,
    Equatorial,
    HorizontalCoordinates,
    Observer,
    RotationMatrix,
    Spherical,
    StateVector,
    Vector,
)
from .engines.deltat import (
    DELTA_T_MODELS,
    get_delta_t_model,
    make_delta_t_model,
    register_delta_t_model,
    set_delta_t_model,
    delta_t_seconds,
)
from .engines.lunar import LibrationInfo
from .frames.coords import (
    angle_between,
    ecliptic,
    equator_from_vector,
    horizon,
    horizon_from_vector,
    sphere_from_vector,
    vector_from_horizon,
    vector_from_sphere,
)
from .frames.earth import observer_gravity, sidereal_time
from .frames.matrix import combine_rotation, identity_matrix, inverse_rotation, pivot, rotate_state, rotate_vector
from .frames.refraction import Refraction, inverse_refraction_angle, refraction_angle
from .frames.rotation import (
    rotation_ecl_eqd,
    rotation_ecl_eqj,
    rotation_ecl_hor,
    rotation_eqd_ecl,
    rotation_eqd_eqj,
    rotation_eqd_hor,
    rotation_eqj_ecl,
    rotation_eqj_eqd,
    rotation_eqj_gal,
    rotation_eqj_hor,
    rotation_gal_eqj,
    rotation_hor_ecl,
    rotation_hor_eqd,
    rotation_hor_eqj,
)
from .positions import (
    JupiterMoonsInfo,
    angle_from_sun,
    backdate_position,
    bary_state,
    correct_light_travel,
    ecliptic_geo_moon,
    ecliptic_longitude,
    equator,
    geo_emb_state,
    geo_moon,
    geo_moon_state,
    geo_vector,
    helio_distance,
    helio_state,
    helio_vector,
    jupiter_moons,
    libration,
    observer_state,
    observer_vector,
    pair_longitude,
    sun_position,
    vector_observer,
)
from .constellation import ConstellationInfo, constellation
from .engines._solver import search
from .events.apsis import Apsis, ApsisKind, next_lunar_apsis, next_planet_apsis, search_lunar_apsis, search_planet_apsis
from .events.eclipses import (
    EclipseEvent,
    EclipseKind,
    GlobalSolarEclipseInfo,
    LocalSolarEclipseInfo,
    LunarEclipseInfo,
    next_global_solar_eclipse,
    next_local_solar_eclipse,
    next_lunar_eclipse,
    search_global_solar_eclipse,
    search_local_solar_eclipse,
    search_lunar_eclipse,
)
from .events.elongation import ElongationEvent, Visibility, elongation, search_max_elongation, search_relative_longitude
from .events.illumination import IlluminationInfo, illumination, search_peak_magnitude
from .events.lunar_phase import MoonQuarter, moon_phase, next_moon_quarter, search_moon_phase, search_moon_quarter
from .events.nodes import NodeEventInfo, NodeEventKind, next_moon_node, search_moon_node
from .events.riseset import Direction, HourAngleEvent, search_altitude, search_hour_angle, search_rise_set
from .events.seasons import SeasonsInfo, search_sun_longitude, seasons
from .events.shadow import ShadowInfo, calc_shadow
from .events.transits import TransitInfo, next_transit, search_transit

__all__ = [
    # bodies, constants, errors
    "Body", "body_code", "mass_product", "planet_orbital_period", "synodic_period",
    "KM_PER_AU", "C_AUDAY",
    "EphemcoreError", "InvalidBodyError", "EarthNotAllowedError", "InvalidArgumentError",
    "DateTimeFormatError", "BadVectorError", "TimeMismatchError", "NoConvergeError", "InternalError",
    # time
    "Instant", "DELTA_T_MODELS", "get_delta_t_model", "set_delta_t_model",
    "make_delta_t_model", "register_delta_t_model", "delta_t_seconds",
    # types
    "Vector", "StateVector", "Observer", "Spherical", "Equatorial", "EclipticCoordinates",
    "HorizontalCoordinates", "RotationMatrix",
    # frames
    "angle_between", "ecliptic", "equator_from_vector", "horizon", "horizon_from_vector",
    "sphere_from_vector", "vector_from_horizon", "vector_from_sphere",
    "observer_gravity", "sidereal_time",
    "combine_rotation", "identity_matrix", "inverse_rotation", "pivot", "rotate_state", "rotate_vector",
    "Refraction", "refraction_angle", "inverse_refraction_angle",
    "rotation_eqj_ecl", "rotation_ecl_eqj", "rotation_eqj_eqd", "rotation_eqd_eqj",
    "rotation_eqd_hor", "rotation_hor_eqd", "rotation_hor_eqj", "rotation_eqj_hor",
    "rotation_eqd_ecl", "rotation_ecl_eqd", "rotation_ecl_hor", "rotation_hor_ecl",
    "rotation_eqj_gal", "rotation_gal_eqj",
    # positions
    "geo_moon", "ecliptic_geo_moon", "geo_moon_state", "geo_emb_state", "libration", "LibrationInfo",
    "helio_vector", "helio_distance", "helio_state", "bary_state",
    "correct_light_travel", "backdate_position", "geo_vector", "equator",
    "observer_vector", "observer_state", "vector_observer",
    "sun_position", "ecliptic_longitude", "angle_from_sun", "pair_longitude",
    "JupiterMoonsInfo", "jupiter_moons",
    "ConstellationInfo", "constellation",
    # search and events
    "search",
    "SeasonsInfo", "seasons", "search_sun_longitude",
    "MoonQuarter", "moon_phase", "search_moon_phase", "search_moon_quarter", "next_moon_quarter",
    "Direction", "HourAngleEvent", "search_hour_angle", "search_rise_set", "search_altitude",
    "ApsisKind", "Apsis", "search_lunar_apsis", "next_lunar_apsis", "search_planet_apsis", "next_planet_apsis",
    "Visibility", "ElongationEvent", "elongation", "search_relative_longitude", "search_max_elongation",
    "IlluminationInfo", "illumination", "search_peak_magnitude",
    "ShadowInfo", "calc_shadow",
    "EclipseKind", "EclipseEvent", "LunarEclipseInfo", "GlobalSolarEclipseInfo", "LocalSolarEclipseInfo",
    "search_lunar_eclipse", "next_lunar_eclipse",
    "search_global_solar_eclipse", "next_global_solar_eclipse",
    "search_local_solar_eclipse", "next_local_solar_eclipse",
    "TransitInfo", "search_transit", "next_transit",
    "NodeEventKind", "NodeEventInfo", "search_moon_node", "next_moon_node",
]
