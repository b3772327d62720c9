"""
Ingredient catalog layer.

Sources read rows from Supabase / CSV / memory and convert them into immutable
Ingredient objects (catalog.parsing); IngredientCatalog owns the cached
snapshot that the rest of the engine reads from.
"""
