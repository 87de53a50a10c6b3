"""
Packing-list recommendation engine.

Responsibilities:
- Load the immutable item catalog once per process.
- Score every item against a trip context (weather, temperature, activities,
  trip type, duration).
- Filter, deduplicate and cap items per category.
- Rank the survivors and group them into localised category buckets.
"""
