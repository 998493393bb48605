from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 1) -> float:
    """
    Round exact halves away from zero: 2.25 -> 2.3 (round() gives 2.2).

    Works on the float's exact binary value, so 1.15 (stored as
    1.1499...) still rounds to 1.1.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
