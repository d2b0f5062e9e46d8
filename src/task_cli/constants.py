"""Shared constants for task-cli."""

# Status glyphs as stored on disk and shown in listings
PENDING_MARK = " "
COMPLETED_MARK = "✓"

# Character repeated under the listing header
HEADER_RULE = "─"

# Description truncation for log output
DESCRIPTION_PREVIEW_LENGTH = 60


def truncate(text: str, max_length: int = DESCRIPTION_PREVIEW_LENGTH) -> str:
    """Truncate text with ellipsis if it exceeds max_length."""
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text
