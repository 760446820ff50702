from fetchaller.core.config import CHARS_PER_TOKEN


def truncation_marker(max_tokens: int) -> str:
    return f"\n\n[Truncated at ~{max_tokens} tokens]"


def truncate(text: str, max_tokens: int) -> str:
    """
    Cut text to roughly max_tokens tokens.
    The budget is converted to characters (CHARS_PER_TOKEN each); the cut may
    land mid-word.
    """
    max_chars = max_tokens * CHARS_PER_TOKEN
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + truncation_marker(max_tokens)
