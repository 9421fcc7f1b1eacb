"""Stateless helpers for routing Bot Framework messages between participants."""

__version__ = "0.1.0"
