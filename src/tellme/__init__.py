"""tellme: remember the output of the last shell command."""

__version__ = "0.3.0"

__all__ = ["__version__"]
