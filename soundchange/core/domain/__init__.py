# soundchange\core\domain\__init__.py
"""
Domain Entities and Value Objects.

Phonemes, feature diffs and languages, the matcher tree, and the rule and
rule-set types built on top of them. All of them are immutable once built.
"""
