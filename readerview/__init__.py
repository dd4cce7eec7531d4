"""readerview: readable content extraction for web pages."""

__version__ = "0.1.0"
