"""Shiptivity command-line interface."""
