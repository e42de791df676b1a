"""Message formatting with positional placeholders and locale lookups.

Templates use `{0}`, `{1}`, ... for arguments. Two modifiers exist:

- `{0:c}` looks the argument up in its clause form (`c:<keyword>`) first
- `{0*}` inserts the argument verbatim, without keyword translation

Arguments are keywords translated through the locale, numbers, or phrases
already produced by the translator (inserted as-is, so calls nest). A list
passed as the template is rendered as a quoted disjunctive list.
"""

import re
from dataclasses import dataclass, field
from typing import Sequence

PLACEHOLDER_PATTERN = re.compile(r"\\\{|\{(\d+)(\*)?(?::(c))?\}")


class Phrase(str):
    """Text already rendered by a translator."""


@dataclass(frozen=True)
class LocaleSet:
    """Translations for one locale."""
    locale: str
    sentences: dict[str, str] = field(default_factory=dict)
    keywords: dict[str, str] = field(default_factory=dict)
    quote_start: str = '"'
    quote_end: str = '"'
    list_separator: str = ", "
    list_last_separator: str = " or "


class Translator:
    """Callable message formatter: `t(template, *args) -> Phrase`."""

    def __init__(self, locale_set: LocaleSet | None = None):
        self.locale_set = locale_set or LocaleSet(locale="en")

    @property
    def locale(self) -> str:
        return self.locale_set.locale

    def __call__(self, template: str | Sequence[str], *args: object) -> Phrase:
        if not isinstance(template, str):
            return self.translate_list(template)
        sentence = self.locale_set.sentences.get(template, template)

        def substitute(match: re.Match) -> str:
            if match.group(1) is None:
                return "{"
            index = int(match.group(1))
            if index >= len(args) or args[index] is None:
                return ""
            return self.translate_keyword(args[index], literal=bool(match.group(2)), clause=bool(match.group(3)))

        return Phrase(PLACEHOLDER_PATTERN.sub(substitute, sentence))

    def translate_keyword(self, keyword: object, literal: bool = False, clause: bool = False) -> str:
        """Render a single argument.

        Args:
            keyword: Keyword, number or Phrase
            literal: Insert verbatim
            clause: Prefer the clause form of the keyword

        Returns:
            Rendered text
        """
        if isinstance(keyword, Phrase):
            return str(keyword)
        if isinstance(keyword, bool):
            keyword = "true" if keyword else "false"
        if isinstance(keyword, (int, float)):
            return str(keyword)
        text = str(keyword)
        if literal:
            return text
        keywords = self.locale_set.keywords
        if clause and f"c:{text}" in keywords:
            return keywords[f"c:{text}"]
        return keywords.get(text, text)

    def translate_list(self, items: Sequence[object]) -> Phrase:
        """Render items as a quoted disjunctive list: "a", "b" or "c"."""
        locale = self.locale_set
        quoted = [f"{locale.quote_start}{self.translate_keyword(item)}{locale.quote_end}" for item in items]
        if len(quoted) <= 1:
            return Phrase("".join(quoted))
        head = locale.list_separator.join(quoted[:-1])
        return Phrase(f"{head}{locale.list_last_separator}{quoted[-1]}")


def capitalize(message: str) -> str:
    """Upper-case the first character of a rendered message."""
    return message[:1].upper() + message[1:]
