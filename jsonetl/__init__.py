"""Configuration-driven loading of JSON documents into relational tables."""

__version__ = "1.0.0"