"""render rule table: one pure styling function per node kind."""

from typing import Any, Callable, TypeVar

from md2wechat.core.models import Node, NodeKind
from md2wechat.core.settings import Settings

RenderRule = Callable[[Any, Settings], str]


class RuleTable:
    """dispatch table from node kind to render rule."""

    def __init__(self) -> None:
        self._rules: dict[NodeKind, RenderRule] = {}

    def register(self, kind: NodeKind, render_rule: RenderRule) -> None:
        """registers the rule for a node kind, replacing any previous one."""
        self._rules[kind] = render_rule

    def __contains__(self, kind: object) -> bool:
        return kind in self._rules

    def kinds(self) -> set[NodeKind]:
        """returns the node kinds that have a rule."""
        return set(self._rules)

    def render(self, node: Node, settings: Settings) -> str:
        """
        renders a node using the rule for its kind.

        Args:
            node: typed node with children already rendered
            settings: settings snapshot for this render

        Returns:
            HTML string with inline styles

        Raises:
            KeyError: if no rule is registered for the node's kind
        """
        return self._rules[node.kind](node, settings)


# global table
rules = RuleTable()

F = TypeVar("F", bound=RenderRule)


def rule(kind: NodeKind, target_table: RuleTable = rules) -> Callable[[F], F]:
    """
    decorator to register a render rule.

    Args:
        kind: node kind the function renders
        target_table: table to register with (defaults to global)

    Returns:
        decorator function
    """

    def decorator(fn: F) -> F:
        target_table.register(kind, fn)
        return fn

    return decorator

