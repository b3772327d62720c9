"""
Analysis layer: aggregation of per-ingredient profiles and the two balance
analyses (mouthfeel / richness and five-taste gustatory).
"""
