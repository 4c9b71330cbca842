"""Numeric constants shared by the geometry modules."""

# -- Rotation ------------------------------------------------------------

ROTATION_STEP_DEGREES: int = 60
"""Smallest rotation that maps the grid onto itself."""

# -- Line tracing --------------------------------------------------------

LINE_NUDGE: tuple[float, float, float] = (1e-6, 1e-6, -2e-6)
"""Offset added to both line endpoints before interpolation.

Keeps interpolated points off exact cell boundaries so rounding never
lands on a tie. Sums to zero.
"""

FRACTIONAL_TOLERANCE: float = 1e-6
"""Largest allowed |q + r + s| for a FractionalHex."""

# -- Search --------------------------------------------------------------

DEFAULT_MAX_SEARCH_DEPTH: int = 64
"""Default BFS depth limit used by HexGrid when no config overrides it."""
