"""
Integer-domain helpers.

Integer statistics divide with truncation toward zero, the way integer
division behaves in most systems languages. Python's // floors, which
differs for negative quotients.
"""


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer quotient rounded toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("truncating_div: division by zero")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient
