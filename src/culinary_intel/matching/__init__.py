"""
Name matching: normalization helpers and tiered free-text -> catalog resolution.
"""
