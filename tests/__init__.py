# tests\__init__.py
"""
Test suite for soundchange.

Organization:
- `core`: notation parsing, matching, rule application and use cases, with the inventory repository mocked.
- `adapters`: the JSON inventory repository against temporary files.
- `shared`: settings and logging configuration.
"""
