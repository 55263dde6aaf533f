"""
Orbit Propagator
================

Numerical and closed-form spacecraft orbit propagation with configurable
force models and maneuvers.
"""
