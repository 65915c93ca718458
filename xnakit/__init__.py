"""Game framework primitives: errors, time spans, geometry, packed colors, memory streams, graphics descriptions and a game model."""

__version__ = "0.1.0"