from pipegraph.algorithms.tarjan import Tarjan, FilteredTarjan

__all__ = [
    "Tarjan",
    "FilteredTarjan",
]
