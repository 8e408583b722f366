# domain/geometry/constants.py
"""Constants for tolerance-based point comparisons."""

# Default maximum coordinate-wise difference for two points to be considered equal
EQUAL_POINT = 1e-10

# Default tolerance for vector comparisons
EQUAL_VECTOR = 1e-12

# Hash buckets are this many times coarser than the equality tolerance
HASH_GRID_FACTOR = 10.0
