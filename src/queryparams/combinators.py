import functools as _functools
import typing as _ty

_T = _ty.TypeVar("_T")
_U = _ty.TypeVar("_U")
_A = _ty.TypeVar("_A")

# Parsers read `data` from `pos` and return the position after the match.
# The input is never sliced while parsing, so a whole parse stays linear.
Parser = _ty.Callable[[str, int], tuple[int, _T]]


class ParseError(ValueError):
    """Base class for errors raised by parsers. `pos` is the offset in
    `data` where the parser gave up."""

    def __init__(self, data: str, pos: int, message: str | None = None):
        self.data = data
        self.pos = pos
        super().__init__(message or f"cannot parse at {data[pos:pos + 32]!r}")

    @property
    def remainder(self):
        return self.data[self.pos :]


class NoMatch(ParseError):
    """The parser does not match at this position; callers may try
    something else."""


class StructuralError(ParseError):
    """The parser cannot resynchronize, input cannot be parsed at all."""


def _parser(factory):
    @_functools.wraps(factory)
    def _make(*args, **kwargs):
        parser = factory(*args, **kwargs)
        parser.__qualname__ = parser.__name__ = factory.__name__
        return parser

    return _make


@_parser
def tag(literal: str) -> Parser[str]:
    def parse(data: str, pos: int = 0):
        if data.startswith(literal, pos):
            return pos + len(literal), literal
        raise NoMatch(data, pos, f"expected {literal!r} at {data[pos:pos + 32]!r}")

    return parse


@_parser
def take_while(predicate: _ty.Callable[[str], bool]) -> Parser[str]:
    def parse(data: str, pos: int = 0):
        end = pos
        size = len(data)
        while end < size and predicate(data[end]):
            end += 1
        return end, data[pos:end]

    return parse


@_parser
def opt(parser: Parser[_T]) -> "Parser[_T | None]":
    def parse(data: str, pos: int = 0):
        try:
            return parser(data, pos)
        except NoMatch:
            return pos, None

    return parse


@_parser
def alt(*parsers: Parser[_T]) -> Parser[_T]:
    def parse(data: str, pos: int = 0):
        for parser in parsers:
            try:
                return parser(data, pos)
            except NoMatch:
                continue
        raise NoMatch(data, pos)

    return parse


@_parser
def preceded(first: Parser[_ty.Any], second: Parser[_T]) -> Parser[_T]:
    def parse(data: str, pos: int = 0):
        pos, _ = first(data, pos)
        return second(data, pos)

    return parse


@_parser
def separated_pair(
    first: Parser[_T], separator: Parser[_ty.Any], second: Parser[_U]
) -> "Parser[tuple[_T, _U]]":
    def parse(data: str, pos: int = 0):
        pos, left = first(data, pos)
        pos, _ = separator(data, pos)
        pos, right = second(data, pos)
        return pos, (left, right)

    return parse


@_parser
def fold_many0(
    parser: Parser[_T],
    init: _ty.Callable[[], _A],
    fold: _ty.Callable[[_A, _T], _A],
) -> Parser[_A]:
    """Apply `parser` until it stops matching, folding every result into
    the accumulator returned by `init`. Never raises `NoMatch`; zero
    matches give `init()` back untouched.
    """

    def parse(data: str, pos: int = 0):
        acc = init()
        while True:
            try:
                end, item = parser(data, pos)
            except NoMatch:
                return pos, acc
            if end <= pos:
                name = getattr(parser, "__name__", parser)
                raise StructuralError(
                    data, pos, f"{name!r} matched without consuming input"
                )
            acc = fold(acc, item)
            pos = end

    return parse
