"""option_result: Option and Result containers for Python.

Public API:
    - Option, Some, Nothing: values that may be absent
    - Result, Ok, Err: operations that may fail
    - InvalidArgument, UnwrapError, TypeMismatch: contract violations
    - ContainerSettings, get_settings, configure: runtime settings
"""

import logging

from option_result.config import ContainerSettings, SettingsPresets, configure, get_settings
from option_result.errors import ContainerError, InvalidArgument, TypeMismatch, UnwrapError
from option_result.option import (
    Nothing,
    Option,
    OptionTag,
    Some,
    absent,
    none,
    present,
    some,
)
from option_result.result import (
    Err,
    Ok,
    Result,
    ResultTag,
    err,
    failure,
    ok,
    success,
)

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("option_result").addHandler(logging.NullHandler())

__all__ = [
    "ContainerError",
    "ContainerSettings",
    "Err",
    "InvalidArgument",
    "Nothing",
    "Ok",
    "Option",
    "OptionTag",
    "Result",
    "ResultTag",
    "SettingsPresets",
    "Some",
    "TypeMismatch",
    "UnwrapError",
    "absent",
    "configure",
    "err",
    "failure",
    "get_settings",
    "none",
    "ok",
    "present",
    "some",
    "success",
]
