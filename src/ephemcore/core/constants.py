"""
ephemcore.core.constants
------------------------
Physical and conversion constants shared by the engines.

Distances are au unless the name says otherwise; GM values are au^3/day^2
(DE405 constants).
"""

from __future__ import annotations

import math

# ============================================================
# Units
# ============================================================

KM_PER_AU = 1.4959787069098932e+8
C_AUDAY = 173.1446326846693            # speed of light, au/day

PI2 = 2.0 * math.pi
RAD2HOUR = 3.819718634205488           # 12/pi
HOUR2RAD = 0.2617993877991494365       # pi/12
ASEC360 = 1296000.0
ASEC2RAD = 4.848136811095359935899141e-6
ARC = 3600.0 * 180.0 / math.pi         # arcseconds per radian
AU_PER_PARSEC = (180.0 * 3600.0) / math.pi

SECONDS_PER_DAY = 86400.0
DAYS_PER_TROPICAL_YEAR = 365.24217
DAYS_PER_MILLENNIUM = 365250.0
SOLAR_DAYS_PER_SIDEREAL_DAY = 0.9972695717592592
ANGVEL = 7.2921150e-5                  # Earth rotation, rad/s

MEAN_SYNODIC_MONTH = 29.530588
EARTH_ORBITAL_PERIOD = 365.256
NEPTUNE_ORBITAL_PERIOD = 60189.0
REFRACTION_NEAR_HORIZON = 34.0 / 60.0

# ============================================================
# Radii
# ============================================================

SUN_RADIUS_KM = 695700.0
SUN_RADIUS_AU = SUN_RADIUS_KM / KM_PER_AU

EARTH_FLATTENING = 0.996647180302104
EARTH_FLATTENING_SQUARED = EARTH_FLATTENING ** 2
EARTH_EQUATORIAL_RADIUS_KM = 6378.1366
EARTH_EQUATORIAL_RADIUS_AU = EARTH_EQUATORIAL_RADIUS_KM / KM_PER_AU
EARTH_POLAR_RADIUS_KM = EARTH_EQUATORIAL_RADIUS_KM * EARTH_FLATTENING
EARTH_MEAN_RADIUS_KM = 6371.0          # geoid, no atmosphere
EARTH_ATMOSPHERE_KM = 88.0             # effective thickness for lunar eclipses
EARTH_ECLIPSE_RADIUS_KM = EARTH_MEAN_RADIUS_KM + EARTH_ATMOSPHERE_KM

MOON_EQUATORIAL_RADIUS_KM = 1738.1
MOON_EQUATORIAL_RADIUS_AU = MOON_EQUATORIAL_RADIUS_KM / KM_PER_AU
MOON_MEAN_RADIUS_KM = 1737.4
MOON_POLAR_RADIUS_KM = 1736.0
MOON_POLAR_RADIUS_AU = MOON_POLAR_RADIUS_KM / KM_PER_AU

MERCURY_RADIUS_KM = 2439.7
VENUS_RADIUS_KM = 6051.8

JUPITER_EQUATORIAL_RADIUS_KM = 71492.0
JUPITER_POLAR_RADIUS_KM = 66854.0
JUPITER_MEAN_RADIUS_KM = 69911.0
IO_RADIUS_KM = 1821.6
EUROPA_RADIUS_KM = 1560.8
GANYMEDE_RADIUS_KM = 2631.2
CALLISTO_RADIUS_KM = 2410.3

# ============================================================
# Gravitational parameters
# ============================================================

EARTH_MOON_MASS_RATIO = 81.30056

SUN_GM = 0.2959122082855911e-03
MERCURY_GM = 0.4912547451450812e-10
VENUS_GM = 0.7243452486162703e-09
EARTH_GM = 0.8887692390113509e-09
MARS_GM = 0.9549535105779258e-10
JUPITER_GM = 0.2825345909524226e-06
SATURN_GM = 0.8459715185680659e-07
URANUS_GM = 0.1292024916781969e-07
NEPTUNE_GM = 0.1524358900784276e-07
PLUTO_GM = 0.2188699765425970e-11
MOON_GM = EARTH_GM / EARTH_MOON_MASS_RATIO
