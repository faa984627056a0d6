"""
Parenthetical comment removal for header values.
"""


def remove_nested_comments(text: str) -> str:
    """
    Remove balanced parenthetical comments from a string.

    Comments may nest; inner comments go with their parent. An unmatched
    opening parenthesis drops everything after it.

    Args:
        text: Header text possibly containing comments

    Returns:
        str: Text without comments, trimmed of surrounding whitespace

    Example:
        >>> remove_nested_comments("a (b (c) d) e")
        'a e'
    """
    out = []
    depth = 0
    after_comment = False

    for char in text:
        if char == '(':
            depth += 1

        if depth == 0:
            if char.isspace():
                # Collapse the seam left behind by a removed comment
                if after_comment and out and out[-1].isspace():
                    continue
            else:
                after_comment = False
            out.append(char)

        if char == ')' and depth > 0:
            depth -= 1
            if depth == 0:
                after_comment = True

    return ''.join(out).strip()
