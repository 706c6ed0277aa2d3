"""Constants shared by several modules of the package.

A constant used by a single module belongs in that module instead.
"""
