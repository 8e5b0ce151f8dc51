"""
Zwanski API: Query Parameter Dependencies
==========================================

What:  `first_query_value(name)` builds a FastAPI dependency that returns the
       FIRST value of a query parameter, or None when it is absent.
How:   Reads `request.query_params.getlist(name)`. A plain `Query()` parameter
       keeps the last value when a name repeats (`?text=a&text=b` → "b");
       these endpoints answer with the first one.
"""

from typing import Callable, Optional

from fastapi import Request


def first_query_value(name: str) -> Callable[[Request], Optional[str]]:
    def dependency(request: Request) -> Optional[str]:
        values = request.query_params.getlist(name)
        return values[0] if values else None

    dependency.__name__ = f"query_{name}"
    return dependency
