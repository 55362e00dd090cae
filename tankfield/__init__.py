"""Tank arcade game building blocks, a sprite-sheet tile viewer and a websocket game server."""

__version__ = "0.1.0"