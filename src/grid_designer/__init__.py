"""Grid Designer - responsive grid systems and their SCSS source."""

__version__ = "0.1.0"
