"""Proofgate: state snapshot, structural verification and bundle emission."""

from repoguard.proofgate.bundle import emit_bundle
from repoguard.proofgate.snapshot import write_state_snapshot
from repoguard.proofgate.types import ProofgateResult
from repoguard.proofgate.verify import verify_structural

__all__ = ["ProofgateResult", "emit_bundle", "verify_structural", "write_state_snapshot"]
