"""Time-step simulation of a restaurant kitchen with a text-mode front end."""

__version__ = "0.1.0"
__all__ = ["models", "pqueue", "events", "gui", "restaurant"]