from typing import AnyStr


def common_prefix(*values: AnyStr) -> AnyStr:
    """
    Longest leading substring shared by every value.

    The shortest value bounds the result; on ties the first one wins.
    ``str`` inputs are compared per codepoint, ``bytes`` inputs per byte.
    """
    if not values:
        return ""

    min_index = 0
    shortest = values[0]

    for i, value in enumerate(values):
        if not value:
            return value[:0]
        if len(value) < len(shortest):
            shortest = value
            min_index = i

    end = len(shortest)
    for pos in range(len(shortest)):
        if any(
                other[pos] != shortest[pos]
                for j, other in enumerate(values)
                if j != min_index
        ):
            end = pos
            break

    return shortest[:end]
