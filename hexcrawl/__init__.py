"""Hex crawl map engine: coordinates, flood fill, patterns, biomes, history."""
