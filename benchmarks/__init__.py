"""Performance benchmarks for socnet.

This package contains timing scripts for the graph analyses on random
graphs of increasing size.
"""
