"""Locale tables for diagnostic messages.

English templates are the message keys, so `en` only needs keywords whose
wording differs from the key. Other locales translate whole sentences.
"""

from .translator import LocaleSet

EN = LocaleSet(
    locale="en",
    keywords={
        "disallow": "disallowed",
        "empty": "be empty",
    },
)

JA = LocaleSet(
    locale="ja",
    sentences={
        '{0} is {1}': '{0}は{1}',
        'the "{0}" {1}': '「{0*}」{1}',
        'the "{0*}" {1}': '「{0*}」{1}',
        'the {0}': '{0}',
        '{0} of {1}': '{1}の{0}',
        '{0} must not be {1}': '{0}は{1}であってはいけません',
        '{0} expects {1}': '{0}には{1}を指定してください',
        '{0} expects {1:c}': '{0}には{1:c}を指定してください',
        '{0} greater than {1}': '{1}より大きい{0}',
        '{0:c} and {1:c}': '{0:c}かつ{1:c}',
        'less than or equal to {0}': '{0}以下',
        'less than {0}': '{0}未満',
        'in the range between {0} and {1}': '{0}から{1}の範囲',
        '{0} behaves the same as {1} if {2}': '{2}の場合、{0}は{1}と同じように振る舞います',
        'either {0}': '{0}のいずれか',
        'valid {0}': '妥当な{0}',
        '{0} as {1}': '{1}として{0}',
        '{0} to {1}': '{0}から{1}',
        '{0} should not {1}': '{0}を{1}べきではありません',
        '{0} is unmatched with the below patterns: {1}': '{0}は次のパターンにマッチしません: {1}',
        'rule execution failed: {0*}': 'ルールの実行に失敗しました: {0*}',
    },
    keywords={
        "attribute": "属性",
        "class name": "クラス名",
        "element": "要素",
        "value": "値",
        "disallow": "許可されていません",
        "empty": "空にする",
        "empty string": "空文字",
        "integer": "整数",
        "non-negative integer": "非負整数",
        "floating-point number": "浮動小数点数",
        "zero": "ゼロ",
        "one": "1",
        "angle": "角度",
        "hash-name reference": "ハッシュ名参照",
        "alpha channel value": "アルファチャンネル値",
    },
    quote_start="「",
    quote_end="」",
    list_separator="、",
    list_last_separator="、",
)

LOCALES: dict[str, LocaleSet] = {
    EN.locale: EN,
    JA.locale: JA,
}
