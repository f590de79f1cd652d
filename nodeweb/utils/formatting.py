"""
Human-readable rendering helpers used in error bodies and log lines.
"""


def ordinal(n: int) -> str:
    """
    Render a non-negative integer as an English ordinal.

    Example:
        >>> ordinal(1), ordinal(2), ordinal(3), ordinal(8), ordinal(11), ordinal(22)
        ('1st', '2nd', '3rd', '8th', '11th', '22nd')
    """
    if n < 0:
        raise ValueError(f"ordinal() expects a non-negative integer, got {n}")
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def epoch_descriptor(epoch) -> str:
    """
    Describe the epoch a leader lookup was made for.

    Returns "current" when no epoch was given, otherwise "for the Nth epoch".
    """
    if epoch is None:
        return "current"
    return f"for the {ordinal(epoch)} epoch"
