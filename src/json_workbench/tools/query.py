"""JMESPath querying over parsed data."""

import logging
from typing import Any

import jmespath
from jmespath.exceptions import JMESPathError

from json_workbench.errors import QueryError

logger = logging.getLogger(__name__)


def compile_query(expression: str) -> Any:
    """Compile a JMESPath expression.

    Raises:
        QueryError: If the expression is malformed
    """
    try:
        return jmespath.compile(expression)
    except JMESPathError as e:
        raise QueryError(str(e)) from e


def query_json(data: Any, expression: str) -> Any:
    """Evaluate a JMESPath expression against ``data``.

    A blank expression returns the data unchanged. A malformed expression
    (or one failing at evaluation time) returns an error-shaped value
    ``{"error": "Invalid JMESPath query: ..."}`` instead of raising.
    """
    if not expression.strip():
        return data

    try:
        return compile_query(expression).search(data)
    except (QueryError, JMESPathError) as e:
        logger.warning("Query %r failed: %s", expression, e)
        return {"error": f"Invalid JMESPath query: {e}"}
