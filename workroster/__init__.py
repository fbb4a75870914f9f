"""Staff roster kept in a text file, with a console menu, small demos and container helpers."""

__version__ = "0.1.0"