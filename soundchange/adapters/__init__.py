# soundchange\adapters\__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in `soundchange.core.ports`:
- `persistence.json_inventory_repo`: Secondary Adapter (Driven) - phoneme inventories stored as JSON files.
"""
