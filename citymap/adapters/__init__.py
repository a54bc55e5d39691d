"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph sources (built-in dataset, CSV files)
- Graph solvers (Dijkstra, Prim)
"""
