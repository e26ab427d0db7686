"""
ephemcore.engines.tables
------------------------
Coefficient tables for the analytic models. Pure data; no imports.
"""
