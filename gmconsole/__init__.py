"""Game-master console for a 2D tactical space map: script host, template database, GM actions, camera, grid, map icons and a pygame window."""

__version__ = "0.1.0"