"""Partial-update helpers shared by record services."""

from typing import Any

from pydantic import BaseModel


def clearable_changes(payload: BaseModel, *, nullable: frozenset[str]) -> dict[str, Any]:
    """Fields the caller actually sent.

    An explicit ``null`` clears a field listed in ``nullable``; for any other
    field it means "leave unchanged".
    """
    return {
        name: value
        for name, value in payload.model_dump(exclude_unset=True).items()
        if value is not None or name in nullable
    }
