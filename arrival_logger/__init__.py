"""Periodic bus arrival logger for a single Gyeonggi bus station."""

__version__ = "0.1.0"
