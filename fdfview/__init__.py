"""Viewer for FDF height maps, with isometric projection, XPM loading and text and buffer helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "colors",
    "heightmap",
    "image",
    "linereader",
    "linkedlist",
    "memory",
    "projection",
    "strings",
    "viewer",
    "wordtab",
    "xpm",
]