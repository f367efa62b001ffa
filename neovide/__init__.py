"""Core model of a graphical Neovim front end: settings, events, grids and windows."""

__version__ = "0.1.0"