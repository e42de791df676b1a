"""class-naming: every class name must match one of the configured patterns."""

from markup_dom import Element, NodeType, TextUtils

from ..diagnostics import Severity
from .framework import LintRule, RuleContext
from .helpers import match, to_pattern_list


class ClassNamingRule(LintRule):
    """Require class names to follow a naming convention."""

    default_severity = Severity.WARNING
    default_value = None
    value_schema = {
        "oneOf": [
            {"type": "null"},
            {"type": "string"},
            {"type": "array", "items": {"type": "string"}},
        ]
    }

    @property
    def name(self) -> str:
        return "class-naming"

    async def verify(self, context: RuleContext) -> None:
        patterns = to_pattern_list(context.settings.value)
        if not patterns:
            return
        t = context.t
        quoted_patterns = '"' + '", "'.join(patterns) + '"'

        def check(el: Element) -> None:
            for attr in el.get_attribute_token("class"):
                if attr.is_dynamic_value:
                    continue
                value_node = attr.value_node
                for class_name in TextUtils.split_tokens(attr.value):
                    if any(match(class_name, pattern) for pattern in patterns):
                        continue
                    context.report(
                        attr,
                        t(
                            '{0} is unmatched with the below patterns: {1}',
                            t('the "{0*}" {1}', class_name, 'class name'),
                            t('{0*}', quoted_patterns),
                        ),
                        line=value_node.start_line if value_node else None,
                        col=value_node.start_col if value_node else None,
                        raw=value_node.raw if value_node else None,
                    )

        await context.document.walk_on(NodeType.ELEMENT, check)
