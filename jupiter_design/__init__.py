"""Chainable builders that generate Tailwind CSS class strings for buttons, cards, layouts and interactive elements."""

__version__ = "0.1.0"

__all__ = ["button", "card", "interactive", "layout", "tokens"]