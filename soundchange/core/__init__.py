# soundchange\core\__init__.py
"""
Core Domain Layer.

This package contains the pure logic of the system: the notation compiler,
the matching engine and the rule-application driver.
It strictly follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on infrastructure (files, databases).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
