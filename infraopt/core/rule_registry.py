"""Optimization Rule Registry — stores declarative trigger/action rules.

Invariants:
    - Rules are stored, never evaluated here
    - trigger_condition / optimization_action are opaque text: no parsing, no validation
    - execution_count starts at 0 and no operation in this module changes it
"""

from infraopt.core.domain_types import CallContext, RuleId, UnvalidatedText
from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.errors import ERR_OWNER_ONLY_PERFORMANCE
from infraopt.core.records import OptimizationRule, Registration


class RuleRegistry:
    """Keyed store of OptimizationRule."""

    def __init__(
        self, guard: AuthorizationGuard,
        rules: dict[RuleId, OptimizationRule] | None = None,
    ):
        self._guard = guard
        self._rules: dict[RuleId, OptimizationRule] = dict(rules or {})

    def create_rule(
        self, ctx: CallContext, rule_id: RuleId, rule_name: str,
        trigger_condition: str, optimization_action: str,
        priority: int, quantum_enhanced: bool,
    ) -> Registration[OptimizationRule]:
        denied = self._guard.check(ctx, "create_rule", ERR_OWNER_ONLY_PERFORMANCE)
        if denied:
            raise denied
        rule = OptimizationRule(
            rule_name=rule_name,
            trigger_condition=UnvalidatedText(trigger_condition),
            optimization_action=UnvalidatedText(optimization_action),
            priority=priority,
            quantum_enhanced=quantum_enhanced,
            execution_count=0,
        )
        replaced = rule_id in self._rules
        self._rules[rule_id] = rule
        return Registration(record=rule, replaced=replaced)

    def get(self, rule_id: str) -> OptimizationRule | None:
        return self._rules.get(RuleId(rule_id))

    def items(self) -> list[tuple[RuleId, OptimizationRule]]:
        """All rules, highest priority first, ties broken by id."""
        return sorted(self._rules.items(), key=lambda kv: (-kv[1].priority, kv[0]))

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)
