"""Variation graph store, GFA codec, and loader."""

from panquery.infrastructure.graph.loader import GraphLoadError, load_graph
from panquery.infrastructure.graph.store import Step, VariationGraph

__all__ = ["GraphLoadError", "Step", "VariationGraph", "load_graph"]
