"""Core game-engine building blocks: result codes, scope guards, 3D math, rigid bodies, GPU buffer layouts, platform helpers and a tick clock."""

__version__ = "0.1.0"