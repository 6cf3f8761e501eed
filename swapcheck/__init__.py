"""Checker, randomized tester and stack model for push_swap sorting programs."""

__version__ = "0.1.0"