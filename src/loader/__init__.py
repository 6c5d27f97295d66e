"""Interfaces for loading shell syntax trees from JSON documents."""

from .json_loader import NODE_TYPES, ROOT_TYPES, LoadError, LoadResult, load_file, load_json, load_tree

__all__ = ["LoadError", "LoadResult", "NODE_TYPES", "ROOT_TYPES", "load_file", "load_json", "load_tree"]
