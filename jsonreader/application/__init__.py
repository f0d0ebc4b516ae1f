# jsonreader/application/__init__.py

"""Application layer: JSON decoding, value conversion and load orchestration."""
