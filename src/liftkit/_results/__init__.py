from ._option import (
    ABSENT,
    Absent,
    Option,
    OptionUnwrapError,
    Present,
    bind_option,
    from_legacy_option,
    map2_option,
    map_option,
)
from ._result import (
    Failed,
    Ok,
    Result,
    ResultUnwrapError,
    bind_result,
    compose_kleisli,
    from_legacy_result,
    map2_result,
    map_result,
)

__all__ = [
    "ABSENT",
    "Absent",
    "Failed",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Present",
    "Result",
    "ResultUnwrapError",
    "bind_option",
    "bind_result",
    "compose_kleisli",
    "from_legacy_option",
    "from_legacy_result",
    "map2_option",
    "map2_result",
    "map_option",
    "map_result",
]
