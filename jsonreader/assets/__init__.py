# jsonreader/assets/__init__.py

"""JSON documents bundled with the package."""
