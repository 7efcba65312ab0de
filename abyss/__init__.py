"""Core building blocks of a small application engine, with localization and watchdog tools."""

__version__ = "0.1.0"