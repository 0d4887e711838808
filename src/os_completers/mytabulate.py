from typing import List, Sequence


def mytabulate(rows: Sequence[Sequence[str]]) -> str:
    """Format rows of strings into space separated aligned columns"""
    if not rows:
        return ""
    cols: int = max(len(row) for row in rows)
    lens: List[int] = [
        max(len(row[c]) for row in rows if c < len(row)) for c in range(cols)
    ]
    # Last element does not need empty trailing spaces.
    lens[-1] = 0
    return "\n".join(
        " ".join(
            "%-*s" % (lens[c], row[c] if c < len(row) else "") for c in range(cols)
        ).rstrip()
        for row in rows
    )
