"""state-up -- add state management to a React project."""

__version__ = "1.0.1"
