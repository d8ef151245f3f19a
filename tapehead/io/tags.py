"""Tag constants for diagnostic message routing."""

TAGS: set[str] = {
    "prompt",
    "status",
    "error",
    "help",
    "banner",
    "fatal",
}

# Tags rendered without a trailing newline.
INLINE_TAGS: set[str] = {"prompt"}

DISPLAY_TAGS: set[str] = TAGS
