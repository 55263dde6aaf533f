"""
Model Package
=============

Value types, reference frames, physical constants, data tables, and force
models.
"""
