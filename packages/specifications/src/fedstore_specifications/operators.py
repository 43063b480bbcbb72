from enum import Enum


class SpecificationOperator(str, Enum):
    """Supported operators for specifications."""

    # Standard comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    IN = "in"
    NOT_IN = "not_in"
    BETWEEN = "between"

    # String operations
    LIKE = "like"
    CONTAINS = "contains"
    STARTSWITH = "startswith"
    ENDSWITH = "endswith"

    # Null checks
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"

    # Logical operators
    AND = "and"
    OR = "or"
    NOT = "not"


# Operators that take no comparison value.
NULLARY_OPERATORS: frozenset[SpecificationOperator] = frozenset(
    {SpecificationOperator.IS_NULL, SpecificationOperator.IS_NOT_NULL}
)
