"""Semantic output categories and their plain-text labels."""

from enum import Enum


class OutputType(str, Enum):
    """What a piece of output means; decides its color and its label."""
    DEFAULT = "default"
    PROMPT = "prompt"
    ERROR = "error"
    ALL_OK = "all_ok"
    LIST_TITLE = "list_title"
    CUSTOM_INFO = "custom_info"
    MOBILE_SUIT_INFO = "mobile_suit_info"


# Labels written in front of redirected lines
LABELS = {
    OutputType.DEFAULT: "",
    OutputType.PROMPT: "[Prompt]",
    OutputType.ERROR: "[Error]",
    OutputType.ALL_OK: "[AllOk]",
    OutputType.LIST_TITLE: "[List]",
    OutputType.CUSTOM_INFO: "[Info]",
    OutputType.MOBILE_SUIT_INFO: "[Info]",
}


def check_complete(table: dict, name: str) -> None:
    """Raise if a per-type table misses any OutputType."""
    missing = [t.name for t in OutputType if t not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


def label_for(output_type: OutputType) -> str:
    """Return the plain-text label for an output type."""
    return LABELS[OutputType(output_type)]


check_complete(LABELS, "LABELS")
