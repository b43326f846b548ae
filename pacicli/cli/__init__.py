"""
Command line interface for pacicli.
"""

from pacicli.cli.app import app, main

__all__ = ["app", "main"]
