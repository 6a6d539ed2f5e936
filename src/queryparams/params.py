import logging as _logging

from .combinators import (
    ParseError,
    alt,
    fold_many0,
    opt,
    preceded,
    separated_pair,
    tag,
    take_while,
)

_logger = _logging.getLogger(__name__)

KEY_PREFIXES = ("&", "?")
KEY_VALUE_SEPARATOR = "="
PAIR_SEPARATOR = "&"


def _is_not_separator(char: str):
    return char != KEY_VALUE_SEPARATOR


def _is_not_pair_separator(char: str):
    return char != PAIR_SEPARATOR


_key = preceded(
    opt(alt(*(tag(prefix) for prefix in KEY_PREFIXES))),
    take_while(_is_not_separator),
)
_value = preceded(opt(tag(KEY_VALUE_SEPARATOR)), take_while(_is_not_pair_separator))
_pair = separated_pair(_key, tag(KEY_VALUE_SEPARATOR), _value)


def parse_key(data: str, pos: int = 0) -> tuple[int, str]:
    return _key(data, pos)


def parse_value(data: str, pos: int = 0) -> tuple[int, str]:
    return _value(data, pos)


def parse_pair(data: str, pos: int = 0) -> tuple[int, tuple[str, str]]:
    return _pair(data, pos)


def _insert(params: dict[str, str], pair: tuple[str, str]):
    key, value = pair
    params[key] = value
    return params


_parse_parameters = fold_many0(parse_pair, dict, _insert)


def parse_parameters(data: str) -> tuple[str, dict[str, str]]:
    """Returns the unconsumed remainder and the pairs read before it."""
    pos, params = _parse_parameters(data, 0)
    rest = data[pos:]
    if rest:
        _logger.debug(
            "stopped parsing after %d parameters, ignoring %r", len(params), rest
        )
    return rest, params


def parse_params(data: str) -> dict[str, str]:
    """Parse a query string like `?location=minneapolis&category=red` into
    a dict. Repeated keys keep their last value; a key without `=` ends the
    parse, and input that cannot be parsed at all gives `{}`.
    """
    try:
        _, params = parse_parameters(data)
    except ParseError as e:
        _logger.warning("cannot parse query parameters: %s", e)
        return {}
    return params
