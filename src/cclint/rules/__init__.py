from cclint.core.rule import Rule
from cclint.rules import empty, length


def _collect_rules(*modules: object) -> dict[str, type[Rule]]:
    """Collect all concrete Rule subclasses from the given modules."""
    rules: dict[str, type[Rule]] = {}
    for module in modules:
        for name in dir(module):
            obj = getattr(module, name)
            if isinstance(obj, type) and issubclass(obj, Rule) and obj.NAME:
                if obj.NAME in rules and rules[obj.NAME] is not obj:
                    msg = f"Duplicate rule name: {obj.NAME}"
                    raise ValueError(msg)
                rules[obj.NAME] = obj
    return rules


RULES: dict[str, type[Rule]] = _collect_rules(empty, length)
ALL_RULES: list[type[Rule]] = sorted(RULES.values(), key=lambda r: r.NAME)

__all__ = ["ALL_RULES", "RULES"]
