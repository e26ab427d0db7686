"""
ephemcore.frames
----------------
Coordinate frames: precession, nutation, Earth rotation, refraction and the
rotation matrices that connect EQJ, EQD, ECL, HOR and GAL.
"""
