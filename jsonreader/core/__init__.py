# jsonreader/core/__init__.py

"""Core domain models and type definitions with no I/O."""
