"""arraymerge — merge two short number arrays and print them descending.

Interactive console program with a strict layered architecture.
"""

from arraymerge.version import __version__

__all__: list[str] = ["__version__"]
