import logging as _logging

from .combinators import NoMatch, ParseError, StructuralError
from .params import parse_params, parse_parameters
from .query import Query, parse_uri_params

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
