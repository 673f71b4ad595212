"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (Earth radius, tolerances, polygon limits)
- exceptions: Custom exception hierarchy
"""
