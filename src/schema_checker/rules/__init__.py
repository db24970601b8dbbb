"""Rule engines for patch compatibility and documentation consistency."""

from .compatibility import CompatibilityRuleEngine
from .consistency import ConsistencyResult, SchemaDocConsistencyChecker, merge_field_sets

__all__ = [
    "CompatibilityRuleEngine",
    "ConsistencyResult",
    "SchemaDocConsistencyChecker",
    "merge_field_sets",
]
