"""Infrastructure layer: concrete caches, registries and parsers."""
