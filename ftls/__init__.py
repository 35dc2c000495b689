"""Directory-entry helpers, a printf-style formatter and supporting conversions."""

__version__ = "0.1.0"