"""Built-in attribute specification table for HTML and SVG.

Values are either a semantic type tag (see AttributeType) or a list of
accepted literal values. Names are lower-cased; the HTML syntax parser folds
attribute and element names, and lookups fold too.
"""

from typing import Any

EVENT_HANDLERS: tuple[str, ...] = (
    "onabort", "onafterprint", "onauxclick", "onbeforeinput", "onbeforeprint",
    "onbeforeunload", "onblur", "oncancel", "oncanplay", "oncanplaythrough",
    "onchange", "onclick", "onclose", "oncontextmenu", "oncopy", "oncuechange",
    "oncut", "ondblclick", "ondrag", "ondragend", "ondragenter", "ondragleave",
    "ondragover", "ondragstart", "ondrop", "ondurationchange", "onemptied",
    "onended", "onerror", "onfocus", "onformdata", "onhashchange", "oninput",
    "oninvalid", "onkeydown", "onkeypress", "onkeyup", "onlanguagechange",
    "onload", "onloadeddata", "onloadedmetadata", "onloadstart", "onmessage",
    "onmousedown", "onmouseenter", "onmouseleave", "onmousemove", "onmouseout",
    "onmouseover", "onmouseup", "onoffline", "ononline", "onpagehide",
    "onpageshow", "onpaste", "onpause", "onplay", "onplaying", "onpopstate",
    "onprogress", "onratechange", "onreset", "onresize", "onscroll",
    "onscrollend", "onsecuritypolicyviolation", "onseeked", "onseeking",
    "onselect", "onslotchange", "onstalled", "onstorage", "onsubmit",
    "onsuspend", "ontimeupdate", "ontoggle", "onunload", "onvolumechange",
    "onwaiting", "onwheel",
)

GLOBAL_ATTRIBUTES: dict[str, Any] = {
    "accesskey": "String",
    "autocapitalize": ["off", "none", "on", "sentences", "words", "characters"],
    "autofocus": "Boolean",
    "class": "String",
    "contenteditable": ["", "true", "false", "plaintext-only"],
    "dir": ["ltr", "rtl", "auto"],
    "draggable": ["true", "false"],
    "enterkeyhint": ["enter", "done", "go", "next", "previous", "search", "send"],
    "hidden": ["", "hidden", "until-found"],
    "id": "NonEmptyString",
    "inert": "Boolean",
    "inputmode": ["none", "text", "tel", "url", "email", "numeric", "decimal", "search"],
    "is": "String",
    "itemid": "URL",
    "itemprop": "String",
    "itemref": "DOMIDList",
    "itemscope": "Boolean",
    "itemtype": "ItemType",
    "lang": "BCP47",
    "nonce": "String",
    "popover": ["", "auto", "manual"],
    "slot": "String",
    "spellcheck": ["", "true", "false"],
    "style": "String",
    "tabindex": "TabIndex",
    "title": "String",
    "translate": ["", "yes", "no"],
    **{handler: "Function" for handler in EVENT_HANDLERS},
}

_CROSSORIGIN = "Crossorigin"
_FETCHPRIORITY = ["high", "low", "auto"]
_LOADING = ["lazy", "eager"]
_FORM_ENCTYPE = ["application/x-www-form-urlencoded", "multipart/form-data", "text/plain"]
_FORM_METHOD = ["get", "post", "dialog"]
_MEDIA_COMMON = {
    "src": "URL",
    "crossorigin": _CROSSORIGIN,
    "preload": ["", "none", "metadata", "auto"],
    "autoplay": "Boolean",
    "loop": "Boolean",
    "muted": "Boolean",
    "controls": "Boolean",
}
_HYPERLINK = {
    "href": "URL",
    "target": "Target",
    "download": "String",
    "ping": "URLList",
    "rel": "LinkTypeList",
    "hreflang": "BCP47",
    "type": "MIMEType",
    "referrerpolicy": "ReferrerPolicy",
}
_POPOVER_TARGET = {
    "popovertarget": "DOMID",
    "popovertargetaction": ["toggle", "show", "hide"],
}
_FORM_SUBMIT = {
    "formaction": "URL",
    "formenctype": _FORM_ENCTYPE,
    "formmethod": _FORM_METHOD,
    "formnovalidate": "Boolean",
    "formtarget": "Target",
}
_TABLE_CELL = {
    "colspan": "ColSpan",
    "rowspan": "RowSpan",
    "headers": "DOMIDList",
}

_NO_ATTRIBUTES = (
    "abbr", "address", "article", "aside", "b", "bdi", "body", "br", "caption",
    "cite", "code", "datalist", "dd", "dfn", "div", "dl", "dt", "em",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "head", "header", "hgroup", "hr", "i", "kbd", "legend", "main", "mark",
    "menu", "nav", "noscript", "p", "picture", "pre", "rp", "rt", "ruby", "s",
    "samp", "search", "section", "small", "span", "strong", "sub", "summary",
    "sup", "tbody", "tfoot", "thead", "title", "tr", "u", "ul", "var", "wbr",
)

HTML_ELEMENTS: dict[str, dict[str, Any]] = {
    **{name: {} for name in _NO_ATTRIBUTES},
    "html": {"xmlns": "URL", "manifest": "URL"},
    "base": {"href": "URL", "target": "Target"},
    "link": {
        "href": "URL",
        "crossorigin": _CROSSORIGIN,
        "rel": "LinkTypeList",
        "media": "MediaQueryList",
        "integrity": "String",
        "hreflang": "BCP47",
        "type": "MIMEType",
        "referrerpolicy": "ReferrerPolicy",
        "sizes": "LinkSizes",
        "imagesrcset": "SrcSet",
        "imagesizes": "SourceSizeList",
        "as": "Destination",
        "blocking": ["render"],
        "color": "Color",
        "disabled": "Boolean",
        "fetchpriority": _FETCHPRIORITY,
    },
    "meta": {
        "name": "String",
        "http-equiv": ["content-type", "default-style", "refresh", "x-ua-compatible", "content-security-policy"],
        "content": "String",
        "charset": ["utf-8"],
        "media": "MediaQueryList",
    },
    "style": {"media": "MediaQueryList", "blocking": ["render"]},
    "blockquote": {"cite": "URL"},
    "ol": {"reversed": "Boolean", "start": "Int", "type": ["1", "a", "i"]},
    "li": {"value": "Int"},
    "a": dict(_HYPERLINK),
    "q": {"cite": "URL"},
    "data": {"value": "String"},
    "time": {"datetime": "DateTime"},
    "bdo": {"dir": ["ltr", "rtl"]},
    "ins": {"cite": "URL", "datetime": "DateTime"},
    "del": {"cite": "URL", "datetime": "DateTime"},
    "source": {
        "type": "MIMEType",
        "media": "MediaQueryList",
        "src": "URL",
        "srcset": "SrcSet",
        "sizes": "SourceSizeList",
        "width": "Uint",
        "height": "Uint",
    },
    "img": {
        "alt": "String",
        "src": "URL",
        "srcset": "SrcSet",
        "sizes": "SourceSizeList",
        "crossorigin": _CROSSORIGIN,
        "usemap": "URLHash",
        "ismap": "Boolean",
        "width": "Uint",
        "height": "Uint",
        "referrerpolicy": "ReferrerPolicy",
        "decoding": ["sync", "async", "auto"],
        "loading": _LOADING,
        "fetchpriority": _FETCHPRIORITY,
    },
    "iframe": {
        "src": "URL",
        "srcdoc": "String",
        "name": "String",
        "sandbox": "String",
        "allow": "String",
        "allowfullscreen": "Boolean",
        "width": "Uint",
        "height": "Uint",
        "referrerpolicy": "ReferrerPolicy",
        "loading": _LOADING,
    },
    "embed": {"src": "URL", "type": "MIMEType", "width": "Uint", "height": "Uint"},
    "object": {"data": "URL", "type": "MIMEType", "name": "String", "form": "DOMID", "width": "Uint", "height": "Uint"},
    "video": {**_MEDIA_COMMON, "poster": "URL", "playsinline": "Boolean", "width": "Uint", "height": "Uint"},
    "audio": dict(_MEDIA_COMMON),
    "track": {
        "kind": ["subtitles", "captions", "descriptions", "chapters", "metadata"],
        "src": "URL",
        "srclang": "BCP47",
        "label": "String",
        "default": "Boolean",
    },
    "map": {"name": "NonEmptyString"},
    "area": {
        **_HYPERLINK,
        "alt": "String",
        "coords": "Coords",
        "shape": ["circle", "default", "poly", "rect"],
    },
    "table": {},
    "colgroup": {"span": "NonZeroUint"},
    "col": {"span": "NonZeroUint"},
    "td": dict(_TABLE_CELL),
    "th": {**_TABLE_CELL, "scope": ["row", "col", "rowgroup", "colgroup"], "abbr": "String"},
    "form": {
        "accept-charset": "String",
        "action": "URL",
        "autocomplete": ["on", "off"],
        "enctype": _FORM_ENCTYPE,
        "method": _FORM_METHOD,
        "name": "NonEmptyString",
        "novalidate": "Boolean",
        "target": "Target",
        "rel": "LinkTypeList",
    },
    "label": {"for": "DOMID"},
    "input": {
        **_FORM_SUBMIT,
        **_POPOVER_TARGET,
        "accept": "AcceptList",
        "alt": "String",
        "autocomplete": "AutoComplete",
        "checked": "Boolean",
        "dirname": "String",
        "disabled": "Boolean",
        "form": "DOMID",
        "height": "Uint",
        "list": "DOMID",
        "max": "String",
        "maxlength": "Uint",
        "min": "String",
        "minlength": "Uint",
        "multiple": "Boolean",
        "name": "String",
        "pattern": "String",
        "placeholder": "String",
        "readonly": "Boolean",
        "required": "Boolean",
        "size": "NonZeroUint",
        "src": "URL",
        "step": "String",
        "type": [
            "hidden", "text", "search", "tel", "url", "email", "password", "date",
            "month", "week", "time", "datetime-local", "number", "range", "color",
            "checkbox", "radio", "file", "submit", "image", "reset", "button",
        ],
        "value": "String",
        "width": "Uint",
    },
    "button": {
        **_FORM_SUBMIT,
        **_POPOVER_TARGET,
        "disabled": "Boolean",
        "form": "DOMID",
        "name": "String",
        "type": ["submit", "reset", "button"],
        "value": "String",
    },
    "select": {
        "autocomplete": "AutoComplete",
        "disabled": "Boolean",
        "form": "DOMID",
        "multiple": "Boolean",
        "name": "String",
        "required": "Boolean",
        "size": "NonZeroUint",
    },
    "optgroup": {"disabled": "Boolean", "label": "String"},
    "option": {"disabled": "Boolean", "label": "String", "selected": "Boolean", "value": "String"},
    "textarea": {
        "autocomplete": "AutoComplete",
        "cols": "NonZeroUint",
        "dirname": "String",
        "disabled": "Boolean",
        "form": "DOMID",
        "maxlength": "Uint",
        "minlength": "Uint",
        "name": "String",
        "placeholder": "String",
        "readonly": "Boolean",
        "required": "Boolean",
        "rows": "NonZeroUint",
        "wrap": ["soft", "hard"],
    },
    "output": {"for": "DOMIDList", "form": "DOMID", "name": "String"},
    "progress": {"value": "Float", "max": "Float"},
    "meter": {"value": "Float", "min": "Float", "max": "Float", "low": "Float", "high": "Float", "optimum": "Float"},
    "fieldset": {"disabled": "Boolean", "form": "DOMID", "name": "String"},
    "details": {"open": "Boolean", "name": "String"},
    "dialog": {"open": "Boolean"},
    "script": {
        "src": "URL",
        "type": "String",
        "nomodule": "Boolean",
        "async": "Boolean",
        "defer": "Boolean",
        "crossorigin": _CROSSORIGIN,
        "integrity": "String",
        "referrerpolicy": "ReferrerPolicy",
        "blocking": ["render"],
        "fetchpriority": _FETCHPRIORITY,
    },
    "template": {"shadowrootmode": ["open", "closed"]},
    "slot": {"name": "String"},
    "canvas": {"width": "Uint", "height": "Uint"},
}

SVG_GLOBAL_ATTRIBUTES: dict[str, Any] = {
    "id": "NonEmptyString",
    "class": "String",
    "style": "String",
    "lang": "BCP47",
    "tabindex": "TabIndex",
    "xml:lang": "BCP47",
    "xml:space": ["default", "preserve"],
    "systemlanguage": "SVGLanguageTags",
    "requiredextensions": "URLList",
    "clip-path": "CSSClipPath",
    "clip-rule": ["nonzero", "evenodd", "inherit"],
    "color": "Color",
    "display": "CSSDisplay",
    "fill": "SVGPaint",
    "fill-opacity": "CSSOpacity",
    "fill-rule": ["nonzero", "evenodd", "inherit"],
    "filter": "CSSFilter",
    "font-family": "CSSFontFamily",
    "font-size": "CSSFontSize",
    "font-variant": "CSSFontVariant",
    "font-weight": "CSSFontWeight",
    "mask": "CSSMask",
    "mix-blend-mode": "CSSBlendMode",
    "opacity": "CSSOpacity",
    "stop-color": "Color",
    "stop-opacity": "CSSOpacity",
    "stroke": "SVGPaint",
    "stroke-dasharray": "SVGDashArray",
    "stroke-linecap": ["butt", "round", "square"],
    "stroke-linejoin": ["arcs", "bevel", "miter", "miter-clip", "round"],
    "stroke-opacity": "CSSOpacity",
    "stroke-width": "SVGLength",
    "text-decoration": "CSSTextDecoration",
    "transform": "CSSTransformList",
    "transform-origin": "CSSTransformOrigin",
    "visibility": ["visible", "hidden", "collapse"],
    **{handler: "Function" for handler in EVENT_HANDLERS},
}

_SVG_POSITION = {"x": "SVGLength", "y": "SVGLength", "width": "SVGLength", "height": "SVGLength"}
_SVG_ANIMATION = {
    "attributename": "String",
    "from": "SVGAnimatableValue",
    "to": "SVGAnimatableValue",
    "by": "SVGAnimatableValue",
    "values": "String",
    "dur": "SVGClockValue",
    "begin": "SVGBeginValueList",
    "end": "SVGEndValueList",
    "repeatcount": "String",
    "keytimes": "SVGKeyTimes",
    "keysplines": "SVGKeySplines",
    "calcmode": ["discrete", "linear", "paced", "spline"],
    "fill": ["freeze", "remove"],
    "href": "URL",
}

SVG_ELEMENTS: dict[str, dict[str, Any]] = {
    "svg": {
        **_SVG_POSITION,
        "viewbox": "SVGViewBox",
        "preserveaspectratio": "SVGPreserveAspectRatio",
        "xmlns": "URL",
        "xmlns:xlink": "URL",
        "version": "String",
    },
    "g": {},
    "defs": {},
    "desc": {},
    "title": {},
    "symbol": {**_SVG_POSITION, "viewbox": "SVGViewBox", "preserveaspectratio": "SVGPreserveAspectRatio"},
    "use": {**_SVG_POSITION, "href": "URL", "xlink:href": "URL"},
    "image": {**_SVG_POSITION, "href": "URL", "preserveaspectratio": "SVGPreserveAspectRatio", "crossorigin": _CROSSORIGIN},
    "rect": {**_SVG_POSITION, "rx": "SVGLength", "ry": "SVGLength", "pathlength": "Float"},
    "circle": {"cx": "SVGLength", "cy": "SVGLength", "r": "SVGLength", "pathlength": "Float"},
    "ellipse": {"cx": "SVGLength", "cy": "SVGLength", "rx": "SVGLength", "ry": "SVGLength", "pathlength": "Float"},
    "line": {"x1": "SVGLength", "y1": "SVGLength", "x2": "SVGLength", "y2": "SVGLength", "pathlength": "Float"},
    "polygon": {"points": "SVGPoints", "pathlength": "Float"},
    "polyline": {"points": "SVGPoints", "pathlength": "Float"},
    "path": {"d": "SVGPathCommands", "pathlength": "Float"},
    "text": {"x": "SVGLengthList", "y": "SVGLengthList", "dx": "SVGLengthList", "dy": "SVGLengthList", "rotate": "SVGNumberList", "textlength": "SVGLength"},
    "tspan": {"x": "SVGLengthList", "y": "SVGLengthList", "dx": "SVGLengthList", "dy": "SVGLengthList", "rotate": "SVGNumberList"},
    "a": {"href": "URL", "target": "Target", "download": "String", "rel": "LinkTypeList", "referrerpolicy": "ReferrerPolicy"},
    "lineargradient": {"x1": "SVGLength", "y1": "SVGLength", "x2": "SVGLength", "y2": "SVGLength", "gradientunits": ["userspaceonuse", "objectboundingbox"], "gradienttransform": "CSSTransformList", "spreadmethod": ["pad", "reflect", "repeat"], "href": "URL"},
    "radialgradient": {"cx": "SVGLength", "cy": "SVGLength", "r": "SVGLength", "fx": "SVGLength", "fy": "SVGLength", "gradientunits": ["userspaceonuse", "objectboundingbox"], "href": "URL"},
    "stop": {"offset": "SVGPercentage"},
    "pattern": {**_SVG_POSITION, "viewbox": "SVGViewBox", "patternunits": ["userspaceonuse", "objectboundingbox"], "href": "URL"},
    "hatch": {"x": "SVGLength", "y": "SVGLength", "pitch": "SVGLength", "rotate": "CSSAngle", "hatchunits": ["userspaceonuse", "objectboundingbox"]},
    "clippath": {"clippathunits": ["userspaceonuse", "objectboundingbox"]},
    "mask": {**_SVG_POSITION, "maskunits": ["userspaceonuse", "objectboundingbox"]},
    "marker": {"markerwidth": "SVGLength", "markerheight": "SVGLength", "refx": "SVGLength", "refy": "SVGLength", "orient": "String", "viewbox": "SVGViewBox"},
    "filter": {**_SVG_POSITION, "filterunits": ["userspaceonuse", "objectboundingbox"]},
    "feblend": {"in": "SVGFilterPrimitiveReference", "in2": "SVGFilterPrimitiveReference", "mode": "CSSBlendMode", "result": "String"},
    "fecolormatrix": {"in": "SVGFilterPrimitiveReference", "type": ["matrix", "saturate", "huerotate", "luminancetoalpha"], "values": "SVGColorMatrix", "result": "String"},
    "feconvolvematrix": {"in": "SVGFilterPrimitiveReference", "order": "SVGNumberOptionalNumber", "kernelmatrix": "SVGKernelMatrix", "result": "String"},
    "fegaussianblur": {"in": "SVGFilterPrimitiveReference", "stddeviation": "SVGNumberOptionalNumber", "result": "String"},
    "feoffset": {"in": "SVGFilterPrimitiveReference", "dx": "Float", "dy": "Float", "result": "String"},
    "fefunca": {"type": ["identity", "table", "discrete", "linear", "gamma"], "tablevalues": "SVGNumberList"},
    "animate": dict(_SVG_ANIMATION),
    "set": {"attributename": "String", "to": "SVGAnimatableValue", "dur": "SVGClockValue", "begin": "SVGBeginValueList", "end": "SVGEndValueList", "fill": ["freeze", "remove"]},
    "animatemotion": {**_SVG_ANIMATION, "path": "SVGPathCommands", "keypoints": "SVGKeyPoints", "rotate": "String", "origin": "SVGOrigin"},
    "animatetransform": {**_SVG_ANIMATION, "type": ["translate", "scale", "rotate", "skewx", "skewy"]},
    "foreignobject": dict(_SVG_POSITION),
    "switch": {},
    "view": {"viewbox": "SVGViewBox", "preserveaspectratio": "SVGPreserveAspectRatio"},
    "textpath": {"href": "URL", "startoffset": "SVGLength", "method": ["align", "stretch"], "spacing": ["auto", "exact"], "path": "SVGPathCommands"},
    "style": {"type": "String", "media": "MediaQueryList", "title": "String"},
    "script": {"type": "String", "href": "URL", "crossorigin": _CROSSORIGIN},
    "feimage": {"href": "URL", "preserveaspectratio": "SVGPreserveAspectRatio", "result": "String"},
    "fedisplacementmap": {"in": "SVGFilterPrimitiveReference", "in2": "SVGFilterPrimitiveReference", "scale": "Float", "result": "String"},
    "fecomposite": {"in": "SVGFilterPrimitiveReference", "in2": "SVGFilterPrimitiveReference", "operator": ["over", "in", "out", "atop", "xor", "lighter", "arithmetic"], "result": "String"},
    "feflood": {"flood-color": "Color", "flood-opacity": "CSSOpacity", "result": "String"},
    "femerge": {"result": "String"},
    "femergenode": {"in": "SVGFilterPrimitiveReference"},
    "animatecolor": dict(_SVG_ANIMATION),
    "mpath": {"href": "URL"},
    "metadata": {},
}

# Palpable content per the HTML content model. Replaced and embedded
# elements are left out since they legitimately have no children.
PALPABLE_ELEMENTS: frozenset[str] = frozenset({
    "a", "abbr", "address", "article", "aside", "b", "bdi", "bdo", "blockquote",
    "button", "cite", "code", "data", "del", "details", "dfn", "div", "em",
    "fieldset", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hgroup", "i", "ins", "kbd", "label", "main", "map", "mark",
    "meter", "nav", "ol", "output", "p", "pre", "progress", "q", "ruby", "s",
    "samp", "search", "section", "small", "span", "strong", "sub", "sup",
    "table", "time", "u", "ul", "var", "dl", "menu",
})

# Elements exposed to the accessibility tree with their own content, added
# by the `extends_exposable_elements` option.
EXPOSABLE_ELEMENTS: frozenset[str] = frozenset({
    "caption", "dd", "dt", "figcaption", "legend", "li", "option", "summary",
    "td", "th",
})

# SVG elements whose text content is rendered
SVG_PALPABLE_ELEMENTS: frozenset[str] = frozenset({"text", "tspan", "textpath", "title", "desc"})
