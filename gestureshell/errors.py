#===============================================================================
#  Gesture_Shell | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-16
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Error kinds for menu persistence plus the result objects returned by the
#  load/save entry points. Faults are reported through these results instead
#  of escaping to the caller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .menu_manager import MenuManager


class ErrorKind(Enum):
    PARSE = "parse"    # document is not well-formed XML
    SCHEMA = "schema"  # required attribute or element missing
    IO = "io"          # open/read/write failure


class ShellMenuError(Exception):
    kind = ErrorKind.SCHEMA


class MenuParseError(ShellMenuError):
    kind = ErrorKind.PARSE


class SchemaViolation(ShellMenuError):
    kind = ErrorKind.SCHEMA


@dataclass(frozen=True)
class MenuError:
    kind: ErrorKind
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "MenuError":
        if isinstance(exc, ShellMenuError):
            return cls(exc.kind, str(exc))
        if isinstance(exc, OSError):
            return cls(ErrorKind.IO, str(exc))
        raise TypeError(f"Unexpected error type: {type(exc).__name__}")


@dataclass
class LoadResult:
    manager: "MenuManager"
    error: Optional[MenuError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    error: Optional[MenuError] = None
