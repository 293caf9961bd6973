def clip(text: str, limit: int) -> str:
    """Collapse whitespace and cut ``text`` to ``limit`` chars for a log line."""
    normalized = " ".join(text.split()).strip()
    if len(normalized) <= limit:
        return normalized
    return f"{normalized[:limit]}...(truncated)"
