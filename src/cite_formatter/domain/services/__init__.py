"""Domain services: key generation, name and date rendering, style dispatch."""
