"""no-empty-palpable-content: palpable elements must not be left empty."""

from markup_dom import Element, NodeType, Text

from ..diagnostics import Severity
from ..spec import is_palpable_element, is_void_element
from .framework import LintRule, RuleContext


class NoEmptyPalpableContentRule(LintRule):
    """Warn about palpable elements that contain only whitespace."""

    default_severity = Severity.WARNING
    default_options = {
        "extends_exposable_elements": True,
        "ignore_if_aria_busy": True,
    }
    options_schema = {
        "type": "object",
        "properties": {
            "extends_exposable_elements": {"type": "boolean"},
            "ignore_if_aria_busy": {"type": "boolean"},
        },
        "additionalProperties": False,
    }

    @property
    def name(self) -> str:
        return "no-empty-palpable-content"

    async def verify(self, context: RuleContext) -> None:
        options = context.settings.options
        t = context.t

        def check(el: Element) -> None:
            if not is_palpable_element(
                el,
                extends_svg=False,
                extends_exposable_elements=options["extends_exposable_elements"],
            ):
                return
            if is_void_element(el):
                return
            if options["ignore_if_aria_busy"] and el.get_attribute("aria-busy") == "true":
                return
            if all(isinstance(node, Text) and node.is_whitespace() for node in el.child_nodes):
                context.report(el, t('{0} should not {1}', t('the {0}', 'element'), 'empty'))

        await context.document.walk_on(NodeType.ELEMENT, check)
