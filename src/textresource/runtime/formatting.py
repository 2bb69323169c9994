"""printf-style positional template substitution.

Templates use the conversion syntax of platform string resources:

    %[index$][flags][width][.precision]conversion

Supported conversions:
    s, S        str(value); precision truncates, S upper-cases
    d           integer
    x, X, o     hexadecimal / octal integer
    f, e, E,    floating point (int, float, Decimal accepted)
    g, G
    c           character (int code point or 1-char str)
    %           literal percent sign (consumes no argument)
    n           line separator (consumes no argument)

Flags: '-' (left-justify), '#', '+', ' ', '0' (zero-pad), ',' (locale-aware
grouping via Babel, for d and f).

Argument selection follows Java's Formatter: "%2$s" picks the second
argument; conversions without an explicit index consume arguments in order,
counting independently of explicit indices. Surplus arguments are ignored.

Locale sensitivity: the decimal separator of f/e/g output and the group
separator of ',' conversions come from CLDR data for the given locale.

Divergences from Java: x, X and o render negative integers with a minus
sign ("-ff"), the way Python's printf does, not as two's complement.

Python 3.13+. Uses Babel for locale-aware number symbols.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import NoReturn

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from textresource.constants import DEFAULT_LOCALE
from textresource.diagnostics import TemplateFormatError
from textresource.locale_utils import get_babel_locale

__all__ = ["format_template"]

_CONVERSION_PATTERN = re.compile(
    r"%(?:(?P<index>\d+)\$)?"
    r"(?P<flags>[-#+ 0,]*)"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<conversion>[a-zA-Z%])?"
)

_INTEGER_CONVERSIONS = frozenset("dxXo")
_FLOAT_CONVERSIONS = frozenset("feEgG")

# Default precision for %f, shared by Python, C and Java
_DEFAULT_FLOAT_PRECISION = 6

# Leading signs produced by the '+' and ' ' flags or by CLDR minus signs
_SIGNS = ("+", "-", " ", "\u2212")


@dataclass(frozen=True, slots=True)
class _Conversion:
    """One parsed conversion specifier."""

    text: str
    offset: int
    flags: str
    width: int | None
    precision: int | None
    conversion: str

    def printf_spec(self) -> str:
        """Equivalent Python %-format spec, without the ',' flag."""
        width = "" if self.width is None else str(self.width)
        precision = "" if self.precision is None else f".{self.precision}"
        return f"%{self.flags.replace(',', '')}{width}{precision}{self.conversion}"


def format_template(
    template: str, args: Sequence[object], locale: str = DEFAULT_LOCALE
) -> str:
    """Substitute args into a printf-style template.

    Args:
        template: Template text with %-conversions
        args: Positional arguments
        locale: Locale code for number symbols

    Returns:
        The formatted string

    Raises:
        TemplateFormatError: If a conversion is malformed, refers to a missing
            argument, or receives a value of the wrong type

    Examples:
        >>> format_template("Hello, %1$s", ["Derek"])
        'Hello, Derek'
        >>> format_template("%d apples", [5])
        '5 apples'
        >>> format_template("%,d items", [1234567], "de_DE")
        '1.234.567 items'
        >>> format_template("%.2f", [3.14159], "fr_FR")
        '3,14'
    """
    pieces: list[str] = []
    last = 0
    implicit = 0

    for match in _CONVERSION_PATTERN.finditer(template):
        pieces.append(template[last : match.start()])
        last = match.end()
        spec = _parse_conversion(template, match)

        if spec.conversion == "%":
            pieces.append(_pad("%", spec))
            continue
        if spec.conversion == "n":
            pieces.append("\n")
            continue

        if match["index"] is not None:
            position = int(match["index"])
            if position == 0:
                msg = f"Argument index must start at 1 in '{spec.text}'"
                raise TemplateFormatError(msg, template=template, position=spec.offset)
        else:
            implicit += 1
            position = implicit

        if position > len(args):
            msg = (
                f"Missing argument {position} for '{spec.text}' "
                f"({len(args)} argument(s) supplied)"
            )
            raise TemplateFormatError(msg, template=template, position=spec.offset)

        pieces.append(_convert(args[position - 1], spec, locale, template))

    pieces.append(template[last:])
    return "".join(pieces)


def _parse_conversion(template: str, match: re.Match[str]) -> _Conversion:
    conversion = match["conversion"]
    if conversion is None:
        msg = f"Incomplete conversion at offset {match.start()}"
        raise TemplateFormatError(msg, template=template, position=match.start())
    return _Conversion(
        text=match.group(),
        offset=match.start(),
        flags=match["flags"],
        width=int(match["width"]) if match["width"] else None,
        precision=int(match["precision"]) if match["precision"] is not None else None,
        conversion=conversion,
    )


def _convert(value: object, spec: _Conversion, locale: str, template: str) -> str:
    conversion = spec.conversion

    if conversion in ("s", "S"):
        text = spec.printf_spec().replace("S", "s") % (str(value),)
        return text.upper() if conversion == "S" else text

    if conversion in _INTEGER_CONVERSIONS:
        if isinstance(value, bool) or not isinstance(value, int):
            _raise_mismatch(value, spec, template)
        if "," in spec.flags and conversion == "d":
            return _pad(_grouped(value, spec, locale, "#,##0"), spec, numeric=True)
        return spec.printf_spec() % (value,)

    if conversion in _FLOAT_CONVERSIONS:
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            _raise_mismatch(value, spec, template)
        if "," in spec.flags and conversion == "f":
            precision = _DEFAULT_FLOAT_PRECISION if spec.precision is None else spec.precision
            pattern = "#,##0" + ("." + "0" * precision if precision else "")
            return _pad(_grouped(value, spec, locale, pattern), spec, numeric=True)
        text = spec.printf_spec() % (value,)
        return text.replace(".", _decimal_symbol(locale))

    if conversion == "c":
        if isinstance(value, str) and len(value) == 1:
            char = value
        elif isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0x10FFFF:
            char = chr(value)
        else:
            _raise_mismatch(value, spec, template)
        return _pad(char, spec)

    msg = f"Unknown conversion '{spec.text}'"
    raise TemplateFormatError(msg, template=template, position=spec.offset)


def _raise_mismatch(value: object, spec: _Conversion, template: str) -> NoReturn:
    msg = f"Conversion '{spec.text}' cannot format {type(value).__name__} value {value!r}"
    raise TemplateFormatError(msg, template=template, position=spec.offset)


def _grouped(value: int | float | Decimal, spec: _Conversion, locale: str, pattern: str) -> str:
    # Babel quantizes in the active decimal context; it must hold every digit
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _integer_digits(value) + len(pattern))
        text = babel_numbers.format_decimal(
            value, format=pattern, locale=_babel_locale(locale), decimal_quantization=True
        )
    if value >= 0:
        if "+" in spec.flags:
            return "+" + text
        if " " in spec.flags:
            return " " + text
    return text


def _integer_digits(value: int | float | Decimal) -> int:
    if isinstance(value, int):
        return len(str(abs(value)))
    return len(f"{abs(value):.0f}")


def _pad(text: str, spec: _Conversion, *, numeric: bool = False) -> str:
    if spec.width is None:
        return text
    if "-" in spec.flags:
        return text.ljust(spec.width)
    if numeric and "0" in spec.flags:
        # Zeros go between the sign and the digits: "-001,234"
        sign = text[0] if text.startswith(_SIGNS) else ""
        return sign + text[len(sign) :].rjust(spec.width - len(sign), "0")
    return text.rjust(spec.width)


def _babel_locale(locale: str) -> Locale:
    try:
        return get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return get_babel_locale(DEFAULT_LOCALE)


def _decimal_symbol(locale: str) -> str:
    return babel_numbers.get_decimal_symbol(_babel_locale(locale))
