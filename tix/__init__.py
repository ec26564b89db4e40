"""tix: create an issue and a matching git branch in one step."""

__version__ = "0.1.0"
