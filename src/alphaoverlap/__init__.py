"""Alpha-mask overlap extraction for georeferenced rasters."""

__version__ = "0.1.0"
