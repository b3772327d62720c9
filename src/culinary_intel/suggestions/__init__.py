"""
Suggestion layer: predicate tables per gap type and the ranking engine.
"""
