"""Try values - capture raised or returned faults and compose fallible steps."""

import logging

from src.fallible.capture import is_fault, run_captured, run_or_else, run_or_recover, wrap
from src.fallible.config import StrictConfig, TryConfig, default_config
from src.fallible.monad import (
    Applicative,
    Functor,
    Monad,
    TryMonad,
    bind,
    chain,
    context,
    fapply,
    fmap,
    pure,
    return_,
    sequence,
    traverse,
)
from src.fallible.result import (
    Failure,
    Success,
    Try,
    failure,
    from_failure,
    from_success,
    from_try,
    is_failure,
    is_success,
    is_try,
    success,
)

# Silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Applicative",
    "Failure",
    "Functor",
    "Monad",
    "StrictConfig",
    "Success",
    "Try",
    "TryConfig",
    "TryMonad",
    "bind",
    "chain",
    "context",
    "default_config",
    "failure",
    "fapply",
    "fmap",
    "from_failure",
    "from_success",
    "from_try",
    "is_failure",
    "is_fault",
    "is_success",
    "is_try",
    "pure",
    "return_",
    "run_captured",
    "run_or_else",
    "run_or_recover",
    "sequence",
    "success",
    "traverse",
    "wrap",
]
