"""Game-engine building blocks: sorting, a frame update with sound and rendering, and WAVE loading."""

__version__ = "0.1.0"