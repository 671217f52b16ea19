import logging

from ._core import Config, Pipeable, get_config, set_config
from ._results import (
    ABSENT,
    Absent,
    Failed,
    Ok,
    Option,
    OptionUnwrapError,
    Present,
    Result,
    ResultUnwrapError,
    bind_option,
    bind_result,
    compose_kleisli,
    from_legacy_option,
    from_legacy_result,
    map2_option,
    map2_result,
    map_option,
    map_result,
)

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("liftkit").addHandler(logging.NullHandler())

__all__ = [
    "ABSENT",
    "Absent",
    "Config",
    "Failed",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Pipeable",
    "Present",
    "Result",
    "ResultUnwrapError",
    "bind_option",
    "bind_result",
    "compose_kleisli",
    "from_legacy_option",
    "from_legacy_result",
    "get_config",
    "map2_option",
    "map2_result",
    "map_option",
    "map_result",
    "set_config",
]
