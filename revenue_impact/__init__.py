"""Revenue impact of launch delays and mid-lifecycle recalls."""

__version__ = "0.1.0"
