"""Optical ray data: TM-25 headers and checks, ray item layouts, ray arrays, and helpers."""

__version__ = "0.1.0"