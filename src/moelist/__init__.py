"""moelist - archive listings for forum posts."""

__version__ = "0.0.1"
