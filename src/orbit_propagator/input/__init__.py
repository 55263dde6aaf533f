"""
Input Package
=============

Command-line parsing and scenario configuration for the runner.
"""
