"""Define, store and run simple file backup jobs from the command line."""

__version__ = "0.1.4"