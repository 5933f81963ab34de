"""S-expression values with a reader and a printer."""

from sexp.errors import (
    DelimiterMismatchError,
    DisplayError,
    ParseError,
    SexpError,
    UnexpectedCloseError,
    UnexpectedEndError,
    UnterminatedStringError,
)
from sexp.escape import escape, unescape, unescaped_length
from sexp.lexer import Lexer, Token, TokenKind
from sexp.parser import iter_read, parse, read
from sexp.printer import display
from sexp.value import (
    ListValue,
    NumberValue,
    StringValue,
    SymbolValue,
    Value,
    ValueKind,
    free,
    is_list,
    is_number,
    is_string,
    is_symbol,
)

__all__ = [
    "DelimiterMismatchError",
    "DisplayError",
    "Lexer",
    "ListValue",
    "NumberValue",
    "ParseError",
    "SexpError",
    "StringValue",
    "SymbolValue",
    "Token",
    "TokenKind",
    "UnexpectedCloseError",
    "UnexpectedEndError",
    "UnterminatedStringError",
    "Value",
    "ValueKind",
    "display",
    "escape",
    "free",
    "is_list",
    "is_number",
    "is_string",
    "is_symbol",
    "iter_read",
    "parse",
    "read",
    "unescape",
    "unescaped_length",
]
