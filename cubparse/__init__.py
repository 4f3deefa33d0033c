"""Parse and validate .cub scene description files: header elements and map grid."""

__version__ = "0.1.0"
__all__ = ["stream", "colors", "elements", "mapgrid", "cli"]