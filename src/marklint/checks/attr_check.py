"""Attribute value dispatcher.

`attr_check` decides whether an attribute is declared for its element and,
if so, whether its raw value fits the declared type. Types without a
dedicated checker are accepted as valid.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Literal, Sequence

from ..i18n import Phrase, Translator
from ..spec.models import AttributeSpec, AttributeType, EnumType, NamedType
from .primitive import (
    float_check,
    in_range,
    int_check,
    non_zero_uint_check,
    number_check_with_unit,
    split_unit,
    uint_check,
)

DATA_ATTRIBUTE_PATTERN = re.compile(r"^data-.+$")
ARIA_ATTRIBUTE_PATTERN = re.compile(r"^aria-.+$|^role$")

REFERRER_POLICIES = (
    "",
    "no-referrer",
    "no-referrer-when-downgrade",
    "same-origin",
    "origin",
    "strict-origin",
    "origin-when-cross-origin",
    "strict-origin-when-cross-origin",
    "unsafe-url",
)

BLEND_MODES = (
    "normal",
    "multiply",
    "screen",
    "overlay",
    "darken",
    "lighten",
    "color-dodge",
    "color-burn",
    "hard-light",
    "soft-light",
    "difference",
    "exclusion",
    "hue",
    "saturation",
    "color",
    "luminosity",
)

ANGLE_UNITS = ("deg", "grad", "rad", "turn")


class InvalidType(str, Enum):
    NON_EXISTENT = "non-existent"
    INVALID_VALUE = "invalid-value"


@dataclass(frozen=True)
class Invalid:
    """A failed attribute check."""
    invalid_type: InvalidType
    message: str


Verdict = Invalid | Literal[False]
ValueChecker = Callable[[Translator, str, str], Phrase | Literal[False]]


def attr_check(t: Translator, name: str, value: str, is_custom_rule: bool,
               spec: AttributeSpec | None = None) -> Verdict:
    """Check one attribute against its declaration.

    Args:
        t: Message translator
        name: Attribute name as written
        value: Raw attribute value
        is_custom_rule: True when the declaration comes from user options, in
            which case data-* and ARIA attributes are checked too
        spec: Declaration for the attribute, or None if it is not declared

    Returns:
        False if the attribute is acceptable, otherwise an Invalid verdict
    """
    if not is_custom_rule:
        # data-* accept anything; ARIA has its own rule
        if DATA_ATTRIBUTE_PATTERN.match(name) or ARIA_ATTRIBUTE_PATTERN.match(name):
            return False

    if spec is None:
        return Invalid(
            InvalidType.NON_EXISTENT,
            str(t('{0} is {1}', t('the "{0}" {1}', name, 'attribute'), 'disallow')),
        )

    message = value_check(t, name, value, spec)
    if message:
        return Invalid(InvalidType.INVALID_VALUE, str(message))
    return False


def value_check(t: Translator, name: str, value: str, spec: AttributeSpec) -> Phrase | Literal[False]:
    """Check a value against a declared type, returning a message on failure."""
    spec_type = spec.resolve_type()
    if isinstance(spec_type, EnumType):
        return includes_enum(t, name, value, spec_type.values)
    if isinstance(spec_type, NamedType) and spec_type.tag is not None:
        checker = _CHECKERS.get(spec_type.tag)
        if checker is not None:
            return checker(t, name, value)
    return False


def includes_enum(t: Translator, name: str, value: str, values: Sequence[str]) -> Phrase | Literal[False]:
    if value.lower() in values:
        return False
    return t('{0} expects {1:c}', _the_attribute(t, name), t('either {0}', t(list(values))))


def _the_attribute(t: Translator, name: str) -> Phrase:
    return t('the "{0}" {1}', name, 'attribute')


def _non_empty_string(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if value != "":
        return False
    return t('{0} must not be {1}', t('{0} of {1}', t('the {0}', 'value'), _the_attribute(t, name)), 'empty string')


def _int(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if int_check(value):
        return False
    return t('{0} expects {1}', _the_attribute(t, name), 'integer')


def _uint(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if uint_check(value):
        return False
    return t('{0} expects {1}', _the_attribute(t, name), 'non-negative integer')


def _float(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if float_check(value):
        return False
    return t('{0} expects {1}', _the_attribute(t, name), 'floating-point number')


def _non_zero_uint(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if non_zero_uint_check(value):
        return False
    return t('{0} expects {1}', _the_attribute(t, name), t('{0} greater than {1}', 'floating-point number', 'zero'))


def _zero_to_one(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if in_range(value, 0, 1):
        return False
    return t('{0} expects {1:c}', _the_attribute(t, name), t('in the range between {0} and {1}', 'zero', 'one'))


def _bounded_span(maximum: int) -> ValueChecker:
    def check(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
        if int_check(value) and in_range(value, 0, maximum):
            return False
        return t(
            '{0} expects {1:c}',
            _the_attribute(t, name),
            t(
                '{0:c} and {1:c}',
                t('{0} greater than {1}', 'non-negative integer', 'zero'),
                t('less than or equal to {0}', maximum),
            ),
        )
    return check


def _tab_index(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if int_check(value):
        if Decimal(value) >= -1:
            return False
        return t('{0} behaves the same as {1} if {2}', _the_attribute(t, name), '-1', t('less than {0}', '-1'))
    return t('{0} expects {1:c}', _the_attribute(t, name), t('either {0}', t(['-1', 'zero', 'non-negative integer'])))


def _referrer_policy(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    return includes_enum(t, name, value, REFERRER_POLICIES)


def _url_hash(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if value.startswith("#"):
        return False
    return t('{0} expects {1:c}', _the_attribute(t, name), t('valid {0}', 'hash-name reference'))


def _css_angle(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    if number_check_with_unit(value, ANGLE_UNITS):
        return False
    return t('{0} expects {1}', _the_attribute(t, name), 'angle')


def _css_blend_mode(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    return includes_enum(t, name, value, BLEND_MODES)


def _css_opacity(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    num, unit = split_unit(value)
    if unit == "%":
        if in_range(num, 0, 100):
            return False
        expected = t('{0} to {1}', '0%', '100%')
    else:
        if unit == "" and in_range(num, 0, 1):
            return False
        expected = t('{0} to {1}', '0', '1')
    return t('{0} expects {1:c}', _the_attribute(t, name), t('{0} as {1}', expected, 'alpha channel value'))


def _unimplemented(t: Translator, name: str, value: str) -> Phrase | Literal[False]:
    return False


_CHECKERS: dict[AttributeType, ValueChecker] = {
    AttributeType.NON_EMPTY_STRING: _non_empty_string,
    AttributeType.INT: _int,
    AttributeType.UINT: _uint,
    AttributeType.FLOAT: _float,
    AttributeType.NON_ZERO_UINT: _non_zero_uint,
    AttributeType.ZERO_TO_ONE: _zero_to_one,
    AttributeType.COL_SPAN: _bounded_span(1000),
    AttributeType.ROW_SPAN: _bounded_span(65534),
    AttributeType.TAB_INDEX: _tab_index,
    AttributeType.REFERRER_POLICY: _referrer_policy,
    AttributeType.URL_HASH: _url_hash,
    AttributeType.CSS_ANGLE: _css_angle,
    AttributeType.CSS_BLEND_MODE: _css_blend_mode,
    AttributeType.CSS_OPACITY: _css_opacity,
}

# Every other declared type is accepted as-is until it gets a checker
for _tag in AttributeType:
    _CHECKERS.setdefault(_tag, _unimplemented)
