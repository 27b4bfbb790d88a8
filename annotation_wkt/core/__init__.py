"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Coordinate bounds, ring sizes, world ring limits
- exceptions: Custom exception hierarchy
"""
