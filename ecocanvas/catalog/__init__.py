"""
Product catalog.

Responsibilities:
- Define the immutable Product schema (materials, certifications, impact).
- Load the bundled catalog file once and keep it in memory.
- Look products up by id and category.
"""
