"""bbmark — bracket-tag markup rendering and stripping for discussion content."""

__version__ = "0.1.0"
