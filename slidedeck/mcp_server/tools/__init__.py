"""Tool handler implementations, grouped by the object they act on."""
