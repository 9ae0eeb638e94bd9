def round_float(value: float, precision: int | None = None) -> int | float:
    """Round ``value`` to the nearest integer, or to ``precision`` decimal places.

    round_float(1.337)     -> 1
    round_float(1.337, 1)  -> 1.3
    round_float(1.337, 2)  -> 1.34
    """
    if precision is None:
        return round(value)
    magnitude = 10.0**precision
    return round(value * magnitude) / magnitude
