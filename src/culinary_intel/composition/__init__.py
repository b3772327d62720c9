"""
Composition layer (culinary composition engine)

Wires name resolution, cooking-effect resolution, aggregation, balance
analysis and suggestions into the public CompositionService.
"""
