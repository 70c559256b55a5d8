"""Open pull request pages for the current git repository."""

__version__ = "0.1.0"
