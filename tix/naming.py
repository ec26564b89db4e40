"""Branch name derivation from issue number and title.

Branch names take the form ``{issue_number}-{slug}``, where the slug is a
lowercase, dash-separated rendering of the (possibly shortened) issue title.

Example:
    >>> branch_name(42, "Fix login bug")
    '42-fix-login-bug'
    >>> truncate_and_dash_case("Refactor the parser: better error messages", 20)
    'refactor-the-parser'
"""

DEFAULT_MAX_TITLE_LENGTH = 50


def truncate_and_dash_case(title: str, max_length: int = DEFAULT_MAX_TITLE_LENGTH) -> str:
    """Shorten a title and turn it into a dash-case slug.

    The title is cut to ``max_length`` characters. A cut that lands in the
    middle of a word backs off to the last whitespace inside the cut, unless
    there is none, in which case the hard cut is kept. The result is
    lowercased, stripped of everything that is neither alphanumeric nor
    whitespace, and the remaining words are joined with dashes.

    Args:
        title: Free-text issue title
        max_length: Maximum number of characters of the title to consider

    Returns:
        Slug, possibly empty (e.g. for an all-punctuation title)
    """
    if max_length <= 0:
        return ""

    truncated = title
    if len(title) > max_length:
        truncated = title[:max_length]
        if not title[max_length].isspace():
            boundary = max(
                (i for i, char in enumerate(truncated) if char.isspace()),
                default=None,
            )
            if boundary is not None:
                truncated = truncated[:boundary]

    cleaned = "".join(
        char for char in truncated.strip().lower() if char.isalnum() or char.isspace()
    )
    return "-".join(cleaned.split())


def branch_name(
    issue_number: int,
    title: str,
    max_title_length: int = DEFAULT_MAX_TITLE_LENGTH,
) -> str:
    """Derive the branch name for an issue.

    When the title slugs to nothing, the bare issue number is used rather
    than leaving a trailing dash.

    Args:
        issue_number: Human-facing issue number (GitHub number, GitLab iid)
        title: Issue title
        max_title_length: Maximum title characters to consider

    Returns:
        Branch name such as ``42-fix-login-bug``
    """
    slug = truncate_and_dash_case(title, max_title_length)
    if not slug:
        return str(issue_number)
    return f"{issue_number}-{slug}"
