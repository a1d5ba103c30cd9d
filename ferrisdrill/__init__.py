"""Loading, compiling and completion checks for course exercises, plus worked solutions."""

__version__ = "5.4.1"