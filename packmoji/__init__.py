"""
PackMoji packing-list service.

Recommends, filters, ranks and groups packable items for a trip from a
static item catalog.
"""
