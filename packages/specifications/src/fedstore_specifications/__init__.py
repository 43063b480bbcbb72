from .ast import AttributeSpecification
from .base import (
    AndSpecification,
    BaseSpecification,
    NotSpecification,
    OrSpecification,
)
from .operators import NULLARY_OPERATORS, SpecificationOperator
from .query_options import Pagination, Sorting
from .visitor import SpecificationVisitor

__all__ = [
    # Core types
    "SpecificationOperator",
    "NULLARY_OPERATORS",
    "AttributeSpecification",
    "BaseSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    # Visitor
    "SpecificationVisitor",
    # Query options
    "Pagination",
    "Sorting",
]
