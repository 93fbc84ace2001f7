"""Infrastructure layer: the in-memory graph store and its GFA loader."""
