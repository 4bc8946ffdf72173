"""todofile — a small command-line todo-list manager.

Todos live in a JSON file and are addressed by their position in the list.
"""

from todofile.version import __version__

__all__: list[str] = ["__version__"]
