"""
Cooking layer.

Typed cooking methods, storage of per-ingredient mouthfeel profiles and
method deltas, heuristic base-profile derivation, and the resolver that
combines them without ever raising.
"""
