"""Utility functions."""

import re
from typing import Any

DEFAULT_SERVING_SIZE = "100g (estimated)"

_SERVING_SIZE_RE = re.compile(
    r"(\d+)\s*(g|grams|oz|ounces|cups?|pieces?|servings?)",
    flags=re.IGNORECASE,
)


def join_model_output(output: Any) -> str:
    """
    Replicate returns either a plain string or an iterator of
    streamed chunks depending on the model. Always give back a string.
    """
    if output is None:
        return ""
    if isinstance(output, str):
        return output
    return "".join(str(chunk) for chunk in output)


def strip_code_fences(text: str) -> str:
    # Remove ``` fences the model wraps around its markdown
    return re.sub(r"```\n|```", "", text)


def extract_food_name(caption: str) -> str:
    """First sentence of the caption."""
    return caption.split(".")[0].strip()


def extract_serving_size(caption: str) -> str:
    match = _SERVING_SIZE_RE.search(caption)
    if match:
        return match.group(0)
    return DEFAULT_SERVING_SIZE
