"""Diagnostics package.

Optional plotting and comparison tools. They need the diagnostics extras:
  pip install "ephemcore[diagnostics]"
"""

__all__ = ["plot_deltat"]
