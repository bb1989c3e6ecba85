"""Edit distance used to rank spelling suggestions.

The metric is the cost-1 insert/delete/substitute table with an extra
adjacent-transposition candidate. The transposition candidate is considered at
every cell where the two characters cross, not only when they differ, so the
result matches the ranking users already see for existing dictionaries.
"""


def edit_distance(source: str, target: str, max_distance: int | None = None) -> int:
    """Compute the edit distance between two strings.

    Args:
        source: The string being corrected
        target: The candidate word
        max_distance: Optional bound; once every cell of a row exceeds it the
            computation stops and ``max_distance + 1`` is returned

    Returns:
        The distance, or ``max_distance + 1`` when the bound was exceeded
    """
    rows = len(source) + 1
    cols = len(target) + 1

    # Only the last two rows are needed: dp[i-1] and dp[i-2]
    before_previous: list[int] = []
    previous = list(range(cols))

    for i in range(1, rows):
        current = [i] + [0] * (cols - 1)
        source_char = source[i - 1]
        for j in range(1, cols):
            if source_char == target[j - 1]:
                best = previous[j - 1]
            else:
                best = 1 + min(previous[j], current[j - 1], previous[j - 1])
            if (
                i > 1
                and j > 1
                and source_char == target[j - 2]
                and source[i - 2] == target[j - 1]
            ):
                best = min(best, before_previous[j - 2] + 1)
            current[j] = best

        # Row minima never decrease, so nothing later can come back under the bound
        if max_distance is not None and min(current) > max_distance:
            return max_distance + 1

        before_previous, previous = previous, current

    return previous[cols - 1]
