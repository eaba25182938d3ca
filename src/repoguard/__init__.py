"""WFSL repo admission guard.

Inspects a working directory against the fixed v1 ruleset and emits an
ADMITTED / REFUSED / ERROR verdict plus a durable evidence record.
"""

__version__ = "0.1.0"

from repoguard.engine import CheckResult, check_repo, evaluate_rules  # noqa: E402
from repoguard.types import (  # noqa: E402
    SCHEMA_ID,
    Evidence,
    Finding,
    FindingCode,
    Mode,
    Outcome,
    RuleSet,
    parse_mode,
)

__all__ = [
    "SCHEMA_ID",
    "CheckResult",
    "Evidence",
    "Finding",
    "FindingCode",
    "Mode",
    "Outcome",
    "RuleSet",
    "__version__",
    "check_repo",
    "evaluate_rules",
    "parse_mode",
]
