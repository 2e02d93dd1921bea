"""tests for the render rule table."""

import pytest

from md2wechat.core.models import HorizontalRule, NodeKind, Strong
from md2wechat.core.settings import Settings
from md2wechat.exporters.rules import RuleTable, rule, rules

# pylint: disable=unused-import
from md2wechat.exporters.rules import blocks, inline  # noqa: F401


def test_rule_decorator_registers_function() -> None:
    """@rule registers the function under its node kind."""
    table = RuleTable()

    @rule(NodeKind.STRONG, target_table=table)
    def render_test(_node: Strong, _settings: Settings) -> str:
        return "<b>test</b>"

    assert NodeKind.STRONG in table
    assert table.kinds() == {NodeKind.STRONG}


def test_rule_decorator_returns_function_unchanged() -> None:
    """@rule leaves the decorated function callable."""
    table = RuleTable()

    @rule(NodeKind.HORIZONTAL_RULE, target_table=table)
    def render_test(_node: HorizontalRule, _settings: Settings) -> str:
        return "<hr />"

    assert render_test(HorizontalRule(), Settings()) == "<hr />"


def test_table_render_dispatches_by_kind() -> None:
    """render dispatches on the node's kind tag."""
    table = RuleTable()
    table.register(NodeKind.STRONG, lambda node, settings: f"[{node.content}]")

    assert table.render(Strong(content="hi"), Settings()) == "[hi]"


def test_table_render_passes_settings() -> None:
    """render hands the settings snapshot to the rule."""
    table = RuleTable()
    table.register(NodeKind.STRONG, lambda node, settings: settings.bold_color)

    assert table.render(Strong(content="x"), Settings(bold_color="#123456")) == "#123456"


def test_table_render_unknown_kind_raises() -> None:
    """a node without a registered rule raises KeyError."""
    table = RuleTable()

    with pytest.raises(KeyError):
        table.render(HorizontalRule(), Settings())


def test_register_replaces_previous_rule() -> None:
    """registering a kind twice keeps the latest rule."""
    table = RuleTable()
    table.register(NodeKind.STRONG, lambda node, settings: "old")
    table.register(NodeKind.STRONG, lambda node, settings: "new")

    assert table.render(Strong(content="x"), Settings()) == "new"


def test_global_table_covers_every_node_kind() -> None:
    """the built-in rules handle all styled node kinds."""
    assert rules.kinds() == set(NodeKind)
