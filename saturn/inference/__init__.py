from .resolve import resolution, factor, compute_all_factors, compute_all_resolvents
from .subsume import subsumes, forward_subsumption, backward_subsumption

__all__ = [
    "resolution", "factor", "compute_all_factors", "compute_all_resolvents",
    "subsumes", "forward_subsumption", "backward_subsumption",
]
