"""Meshgaze: terminal status view for a mesh network node."""

__version__ = "0.3.0"
