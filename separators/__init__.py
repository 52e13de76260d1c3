"""
Separators Package

Contains the separation engine:
- Candidate-line generation by range bisection
- Greedy commit loop over both axes
- Per-instance context tying registry, graph and candidates together
"""

from .candidate_generator import generate_candidates, generate_all_candidates
from .greedy_separator import GreedySeparator, SeparationResult, SeparatorState
from .problem_instance import ProblemInstance

__all__ = [
    "generate_candidates",
    "generate_all_candidates",
    "GreedySeparator",
    "SeparationResult",
    "SeparatorState",
    "ProblemInstance",
]
