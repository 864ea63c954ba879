"""Style rule sets keyed by record field and field value."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from browserkit.domain.shared.constants import COMMON_STYLE_KEY, WILDCARD

StyleProperties = dict[str, str]


@dataclass(frozen=True)
class StyleRuleSet:
    """Per-field style rules plus the ``common`` defaults merged under them.

    ``rules`` maps a field key to a mapping of field value (or ``"*"``) to
    CSS-like properties, e.g.::

        {"levelname": {"ERROR": {"color": "#cb2027"}, "*": {"color": "%(color)"}}}
    """

    rules: dict[str, dict[str, StyleProperties]] = field(default_factory=dict)
    common: StyleProperties = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> StyleRuleSet:
        if isinstance(mapping, StyleRuleSet):
            return mapping
        if not mapping:
            return cls()
        common = {str(k): str(v) for k, v in (mapping.get(COMMON_STYLE_KEY) or {}).items()}
        rules = {
            str(key): {
                str(value): {str(prop): str(css) for prop, css in props.items()}
                for value, props in (by_value or {}).items()
            }
            for key, by_value in mapping.items()
            if key != COMMON_STYLE_KEY
        }
        return cls(rules=rules, common=common)

    def __bool__(self) -> bool:
        return bool(self.rules)

    def rule_for(self, key: str, value: object) -> StyleProperties | None:
        """Return the value-specific rule, else the wildcard rule, else None."""
        by_value = self.rules.get(key)
        if by_value is None:
            return None
        rule = by_value.get(str(value))
        if rule is None:
            rule = by_value.get(WILDCARD)
        return rule

    def merged(self, rule: Mapping[str, str]) -> StyleProperties:
        """Overlay ``rule`` on the common properties."""
        return {**self.common, **rule}
