"""WKT polygon codec for occurrence annotation rules.

Converts ``POLYGON`` / ``MULTIPOLYGON`` Well-Known Text to and from the
``(lat, lon)`` coordinate model used for drawing, storing and annotating
areas, including "inverted" polygons expressed as a hole inside a
world-spanning outer ring.
"""

__version__ = "0.1.0"
