"""rcli - CSV transcoding and password generation command-line tool."""

__version__ = "0.1.0"
