"""Offline path tracer: geometry, materials, a camera and a parallel renderer."""

__version__ = "0.1.0"
