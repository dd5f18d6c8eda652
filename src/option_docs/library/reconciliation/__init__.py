"""
Reconciliation of declared and documented options, and problem reporting.

"""

from option_docs.library.reconciliation.problems import (
    CompletenessProblem,
    ProblemKind,
)
from option_docs.library.reconciliation.reconciler import (
    CandidateQueues,
    compare_documented_and_declared,
)
from option_docs.library.reconciliation.report import (
    DEFAULT_INSTRUCTIONS,
    assert_documentation_complete,
    render_problem_report,
)

__all__ = [
    "DEFAULT_INSTRUCTIONS",
    "CandidateQueues",
    "CompletenessProblem",
    "ProblemKind",
    "assert_documentation_complete",
    "compare_documented_and_declared",
    "render_problem_report",
]
