"""HTTP service for creating, fetching and renaming chat rooms kept in MongoDB."""

__version__ = "0.1.0"