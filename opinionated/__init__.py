"""Console account management for a survey application, with binary user, survey and question records."""

__version__ = "0.1.0"