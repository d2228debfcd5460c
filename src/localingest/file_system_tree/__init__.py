"""Filtered file system tree used to build snapshots.

This package provides the anytree-based tree of included directories and files,
built in one depth-first pass with pruning and exclusion rules applied.
"""
