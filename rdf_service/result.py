# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Result pattern for error handling without exceptions.

Every operation that can fail returns Result[T] = Ok[T] | Fail.
Validation failures carry an ErrorKind so callers can branch on the
cause; transport failures leave kind unset and are passed through as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Validation failures detected before anything is sent to the store."""

    INVALID_OBJECT_TYPE = "InvalidObjectType"
    INVALID_DATATYPE = "InvalidDatatype"
    INVALID_LITERAL = "InvalidLiteral"
    MISSING_ARGUMENT = "MissingArgument"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message, optional context and kind."""

    error: str
    context: Any = None
    kind: ErrorKind | None = None
    ok: bool = field(default=False, init=False)


Result = Ok[T] | Fail
