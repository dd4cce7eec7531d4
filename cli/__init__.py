"""readerview command-line interface."""
