"""Static v1 rule sets."""

from repoguard.types import Mode, RuleSet

BASE_REQUIRED: tuple[str, ...] = (".gitignore", "README.md", "LICENSE")

BASE_FORBIDDEN: tuple[str, ...] = (
    "node_modules",
    ".next",
    ".env",
    ".env.local",
    ".env.production",
    ".env.development",
)

REPO_RULES = RuleSet(required=BASE_REQUIRED, forbidden=BASE_FORBIDDEN)

# Action bundles ship built output, so dist/ and build/ stay allowed here.
MARKETPLACE_RULES = RuleSet(
    required=(*BASE_REQUIRED, "action.yml"),
    forbidden=BASE_FORBIDDEN,
)


def rules_for_mode(mode: Mode) -> RuleSet:
    """Resolve the rule set for a mode."""
    if mode is Mode.MARKETPLACE:
        return MARKETPLACE_RULES
    return REPO_RULES
