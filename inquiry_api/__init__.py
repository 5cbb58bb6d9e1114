"""Contact-form inquiry relay: validate, render, email the operator."""

__version__ = "0.1.0"
