"""Dots-and-boxes for the terminal: rules, computer opponents, accounts and avatars."""

__version__ = "1.0.0"