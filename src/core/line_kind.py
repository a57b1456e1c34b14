from enum import Enum


class LineKind(Enum):
    """
    Lexical classification of one schema line — drives the formatter.
    """
    BLANK = "blank"                  # whitespace only
    ATTRIBUTE = "attribute"          # starts with '#['
    STRUCT_OR_ENUM_OPEN = "decl"     # struct / enum / pub struct / pub enum
    BLOCK_CLOSE = "close"            # starts with '}'
    FIELD = "field"                  # inside a struct body, has a ':'
    OTHER = "other"
