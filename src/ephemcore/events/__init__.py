"""
ephemcore.events
----------------
Event searches built on `engines._solver.search`: seasons, lunar phases,
rise/set, apsides, elongation, magnitude, eclipses, transits and nodes.
"""
