"""Shared type aliases used across crumbs modules."""

from datetime import datetime
from typing import Literal, TypeAlias

from crumbs._internal.dates import InvalidDate

SameSite: TypeAlias = Literal["strict", "lax", "none"]

Priority: TypeAlias = Literal["low", "medium", "high"]

# Numbers are epoch milliseconds
Expires: TypeAlias = datetime | int | float | InvalidDate
