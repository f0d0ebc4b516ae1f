# jsonreader/adapters/__init__.py

"""External interfaces: the Python API facade and the command line."""
