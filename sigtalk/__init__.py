"""Signal-based text messaging between a client and a server process, with its formatting and string helpers."""

__version__ = "0.1.0"