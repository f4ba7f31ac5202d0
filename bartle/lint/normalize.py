"""First-line normalization for commit messages."""


def first_line(message: str) -> str:
    """Return the first line of ``message``, trimmed and without carriage returns."""
    if not message:
        return ""
    line = message.split("\n", 1)[0]
    return line.replace("\r", "").strip()
