import typing as _ty
import uritools as _uritools

from .params import parse_params


class Query(str):
    """Raw query string, without the leading `?`.

    Mappings and pair sequences are percent-encoded by uritools, while
    `params()` never decodes, so only plain tokens survive a round trip:
    `Query({"a b": "c&d"}).params() == {"a%20b": "c%26d"}`.
    """

    SEPARATOR = "&"
    ENCODING = "utf-8"

    def __new__(
        cls,
        query: (
            str
            | _ty.Sequence[tuple[str, str | None]]
            | _ty.Mapping[str, str | None | _ty.Sequence[str | None]]
        ) = "",
    ):
        if isinstance(query, str):
            pass
        elif isinstance(query, (bytes, bytearray)):
            raise TypeError(
                "argument should be a str, a mapping or a sequence of pairs, "
                f"not {type(query).__name__!r}"
            )
        else:
            query: str = _uritools.uricompose(
                query=query, querysep=cls.SEPARATOR, encoding=cls.ENCODING
            ).removeprefix("?")

        return str.__new__(cls, query)

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, str(self))

    def params(query) -> dict[str, str]:
        return parse_params(str(query))


def parse_uri_params(uri: str) -> dict[str, str]:
    """Parse the query component of a full URI, `{}` when it has none."""
    query = _uritools.urisplit(uri).query
    if query is None:
        return {}
    return Query(query).params()
