"""Download the latest GitHub release asset and extract its zip contents into a directory."""

__version__ = '1.0.0'
