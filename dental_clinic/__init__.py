"""Dental clinic appointment scheduling backend"""

__version__ = "1.0.0"
