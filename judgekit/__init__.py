"""Checkers, seeded test generators and an A+B interactor for programming-contest problems."""

__version__ = "0.1.0"