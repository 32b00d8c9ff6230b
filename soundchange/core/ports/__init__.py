# soundchange\core\ports\__init__.py
"""Interfaces the core expects infrastructure adapters to implement."""
