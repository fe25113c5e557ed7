# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Provide types that are useful throughout the launcher code."""

from __future__ import annotations

from dataclasses import Field
from typing import Any, Literal, Protocol, TypeAlias, TypeVar

__all__ = (
    "ArgList",
    "Command",
    "DataclassMixin",
    "DataclassProtocol",
    "EnvDict",
    "RejectPolicy",
    "object_to_dataclass",
)


#: Represent command line arguments
ArgList: TypeAlias = list[str]


#: Represent str->str environment variable mappings
EnvDict: TypeAlias = dict[str, str]


#: Represent all the parts of a command-line command to execute
Command: TypeAlias = tuple[str, ...]


#: What to do with a process that failed its liveness probe
RejectPolicy: TypeAlias = Literal["reap", "abandon"]


# This seems like it ought to be in stdlib
class DataclassProtocol(Protocol):
    """Afford better type checking for our dataclasses."""

    __dataclass_fields__: dict[str, Field[Any]]


class DataclassMixin(DataclassProtocol):
    """A mixin for automatically pretty-printing a dataclass."""

    def __str__(self) -> str:
        return "\n".join(f"{k}: {v}" for k, v in self.__dict__.items())


T = TypeVar("T", bound=DataclassProtocol)


def object_to_dataclass(obj: object, typ: type[T]) -> T:
    """Automatically generate a dataclass from an object with appropriate
    attributes.

    Parameters
    ----------
    obj: object
        An object to pull values from (e.g. an argparse Namespace)

    typ:
        A dataclass type to generate from ``obj``

    Returns
    -------
        The generated dataclass instance

    """
    kws = {name: getattr(obj, name) for name in typ.__dataclass_fields__}
    return typ(**kws)
