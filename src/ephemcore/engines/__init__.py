"""
ephemcore.engines
-----------------
Frame-free numerical engines: the ΔT model, VSOP87 series, lunar theory,
the Pluto propagator, Galilean moons and the root search.
"""
