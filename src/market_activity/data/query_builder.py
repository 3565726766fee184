"""
GraphQL query construction for the transaction indexer.

Builds ``getTransactions`` queries with a fluent where-clause builder.
"""
from __future__ import annotations

import json

# Full field set needed to reconstruct market activity.
MARKET_ACTIVITY_FIELDS = """
          hash
          block_height
          messages {
            value {
              ... on MsgCall {
                caller
                pkg_path
                func
              }
            }
          }
          response {
            events {
              ... on GnoEvent {
                type
                pkg_path
                attrs {
                  key
                  value
                }
              }
            }
          }
"""


def _graphql_string(value: str) -> str:
    # JSON string literals are valid GraphQL string literals.
    return json.dumps(value)


class WhereClauseBuilder:
    """Accumulates transaction and event filter conditions."""

    def __init__(self, query_builder: TransactionQueryBuilder) -> None:
        self._conditions: list[str] = []
        self._event_conditions: list[str] = []
        self._query_builder = query_builder

    def success(self, success: bool = True) -> WhereClauseBuilder:
        self._conditions.append(f"success: {{ eq: {'true' if success else 'false'} }}")
        return self

    def block_height_range(self, min_height: int | None = None, max_height: int | None = None) -> WhereClauseBuilder:
        """Filter on block height, both bounds exclusive."""
        bounds = []
        if min_height is not None:
            bounds.append(f"gt: {int(min_height)}")
        if max_height is not None:
            bounds.append(f"lt: {int(max_height)}")
        if bounds:
            self._conditions.append(f"block_height: {{ {', '.join(bounds)} }}")
        return self

    def event_type(self, event_type: str) -> WhereClauseBuilder:
        self._event_conditions.append(f"type: {{ eq: {_graphql_string(event_type)} }}")
        return self

    def market_id(self, market_id: str) -> WhereClauseBuilder:
        """Keep transactions emitting an event tagged with this market_id attribute."""
        self._event_conditions.append(
            f'attrs: {{ key: {{ eq: "market_id" }}, value: {{ eq: {_graphql_string(market_id)} }} }}'
        )
        return self

    def add(self, condition: str) -> WhereClauseBuilder:
        self._conditions.append(condition)
        return self

    def reset(self) -> WhereClauseBuilder:
        self._conditions = []
        self._event_conditions = []
        return self

    def query(self) -> TransactionQueryBuilder:
        """Return to the owning query builder."""
        return self._query_builder

    def build(self) -> str:
        all_conditions = list(self._conditions)
        if self._event_conditions:
            joined = "\n              ".join(self._event_conditions)
            all_conditions.append(
                f"""response: {{
            events: {{
              GnoEvent: {{
              {joined}
              }}
            }}
          }}"""
            )
        return "\n          ".join(c for c in all_conditions if c)


class TransactionQueryBuilder:
    """
    Builder for a named ``getTransactions`` query.

    Example:
        ```python
        qb = TransactionQueryBuilder("getMarketActivity", MARKET_ACTIVITY_FIELDS)
        qb.where().market_id("gno.land/r/demo/market:1")
        query = qb.build()
        ```
    """

    def __init__(self, operation_name: str, fields: str = MARKET_ACTIVITY_FIELDS) -> None:
        if not operation_name.isidentifier():
            raise ValueError(f"operation_name must be a GraphQL name; got {operation_name!r}")
        self.operation_name = operation_name
        self._fields = fields
        self._where = WhereClauseBuilder(self)

    def where(self) -> WhereClauseBuilder:
        return self._where

    def use_fields(self, fields: str) -> TransactionQueryBuilder:
        self._fields = fields
        return self

    def add_fields(self, fields: str) -> TransactionQueryBuilder:
        self._fields += f"\n          {fields}"
        return self

    def build(self) -> str:
        return f"""
      query {self.operation_name} {{
        getTransactions(
          where: {{
            {self._where.build()}
          }}
        ) {{
          {self._fields}
        }}
      }}
    """
