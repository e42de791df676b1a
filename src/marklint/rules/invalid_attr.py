"""invalid-attr: attributes must be declared for their element and fit their type."""

from typing import Any

from markup_dom import AttributeToken, Element, NodeType

from ..checks import InvalidType, attr_check
from ..spec import AttributeSpec
from .framework import LintRule, RuleContext
from .helpers import to_pattern_list

NAMESPACE_DECLARATION_PREFIXES = ("xmlns:", "xml:")


def _custom_specs(allow_attrs: Any) -> dict[str, AttributeSpec | None]:
    """Map allowed attribute names to a custom declaration, or None for "anything"."""
    if isinstance(allow_attrs, dict):
        specs: dict[str, AttributeSpec | None] = {}
        for name, declaration in allow_attrs.items():
            if declaration is None or declaration is True:
                specs[name.lower()] = None
            elif isinstance(declaration, dict) and "type" in declaration:
                specs[name.lower()] = AttributeSpec(name=name, **declaration)
            else:
                specs[name.lower()] = AttributeSpec(name=name, type=declaration)
        return specs
    return {name.lower(): None for name in to_pattern_list(allow_attrs)}


class InvalidAttrRule(LintRule):
    """Report undeclared attributes and values that do not fit their declared type."""

    default_options = {
        "allow_attrs": [],
        "disallow_attrs": [],
        "ignore_attr_name_prefix": [],
    }
    options_schema = {
        "type": "object",
        "properties": {
            "allow_attrs": {
                "oneOf": [
                    {"type": "array", "items": {"type": "string"}},
                    {"type": "object"},
                ]
            },
            "disallow_attrs": {"type": "array", "items": {"type": "string"}},
            "ignore_attr_name_prefix": {
                "oneOf": [
                    {"type": "string"},
                    {"type": "array", "items": {"type": "string"}},
                ]
            },
        },
        "additionalProperties": False,
    }

    @property
    def name(self) -> str:
        return "invalid-attr"

    async def verify(self, context: RuleContext) -> None:
        options = context.settings.options
        allowed = _custom_specs(options["allow_attrs"])
        disallowed = {name.lower() for name in options["disallow_attrs"]}
        prefixes = tuple(to_pattern_list(options["ignore_attr_name_prefix"]))
        specs = context.specs
        t = context.t

        def report(attr: AttributeToken, message: str, on_value: bool) -> None:
            value_node = attr.value_node if on_value else None
            if value_node is None:
                context.report(attr, message)
                return
            context.report(
                attr,
                message,
                line=value_node.start_line,
                col=value_node.start_col,
                raw=value_node.raw,
            )

        def check(el: Element) -> None:
            if not specs.has_element(el.local_name, el.namespace):
                return
            for attr in el.attributes:
                name = attr.name
                key = attr.potential_name
                if key.startswith(NAMESPACE_DECLARATION_PREFIXES):
                    continue
                if prefixes and name.startswith(prefixes):
                    continue

                if key in disallowed:
                    report(attr, t('{0} is {1}', t('the "{0}" {1}', name, 'attribute'), 'disallow'), on_value=False)
                    continue

                if key in allowed:
                    custom = allowed[key]
                    if custom is None or attr.is_dynamic_value:
                        continue
                    verdict = attr_check(t, name, attr.value, True, custom)
                else:
                    spec = specs.get_attribute_spec(el.local_name, name, el.namespace)
                    if spec is not None and attr.is_dynamic_value:
                        continue
                    verdict = attr_check(t, name, attr.value, False, spec)

                if verdict:
                    report(attr, verdict.message, on_value=verdict.invalid_type == InvalidType.INVALID_VALUE)

        await context.document.walk_on(NodeType.ELEMENT, check)
