"""Fuzzy logic operators."""


def fuzzy_and(x, y):
    """Fuzzy AND: the minimum of ``x`` and ``y``, ignoring a negative "don't care" operand.

    If only one operand is negative, the other one is returned. If both are
    negative, the result is negative too.
    """
    res = min(x, y)
    return res if res >= 0 else max(x, y)