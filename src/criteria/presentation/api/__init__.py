"""Fluent API for predicate queries.

Public exports:
    Query: Generic immutable query builder
    ProductQuery: Query with product predicate shortcuts
    QueryAssertion: Assertion builder over query results
"""

from criteria.presentation.api.dsl import ProductQuery, Query, QueryAssertion

__all__ = [
    "ProductQuery",
    "Query",
    "QueryAssertion",
]
