"""
Turn analysis results into what the upload page shows.

Quick scans are shown as metrics (name, calories, serving size,
confidence bar). Detailed and LLaVA scans carry free-form markdown,
which is rendered to HTML, but only when the result actually came from
one of those modes.
"""

from typing import Any, Dict, Union

import markdown as md
import nh3
from markupsafe import Markup

from food_analyzer.schemas import AnalysisMode, MarkdownResult, QuickScanResult

MARKDOWN_MODES = {AnalysisMode.DETAILED, AnalysisMode.LLAVA}

# Order matches the mode buttons on the page
MODE_INFO = {
    AnalysisMode.QUICK: {
        "label": "⚡ Quick Scan",
        "title": "Quick Analysis",
        "blurb": "Get instant calorie estimates and basic nutritional info in seconds.",
        "footer": "Utilizing BLIP-2 for rapid recognition",
    },
    AnalysisMode.LLAVA: {
        "label": "🔍 Advanced Scan",
        "title": "Advanced Detection",
        "blurb": "Detailed food recognition with preparation methods and ingredients.",
        "footer": "Enhanced by LLaVA for precise food detection",
    },
    AnalysisMode.DETAILED: {
        "label": "📊 Detailed Analysis",
        "title": "Complete Analysis",
        "blurb": "Comprehensive nutritional breakdown with allergen information.",
        "footer": "Powered by GPT-4 Vision for comprehensive analysis",
    },
}


ALLOWED_TAGS = {
    "h1", "h2", "h3", "h4", "p", "br", "hr",
    "ul", "ol", "li", "strong", "em",
    "code", "pre", "blockquote", "a",
}
ALLOWED_ATTRIBUTES = {"a": {"href", "title"}}
ALLOWED_URL_SCHEMES = {"http", "https", "mailto"}


def render_markdown(text: str) -> Markup:
    # Model output is untrusted: render first, then sanitize the HTML
    rendered = md.markdown(text, extensions=["sane_lists"])
    cleaned = nh3.clean(
        rendered,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        url_schemes=ALLOWED_URL_SCHEMES,
    )
    return Markup(cleaned)


def confidence_pct(confidence: float) -> int:
    return round((confidence or 0) * 100)


def build_result_view(
    result: Union[QuickScanResult, MarkdownResult],
    mode: AnalysisMode,
) -> Dict[str, Any]:
    if isinstance(result, MarkdownResult) and mode in MARKDOWN_MODES:
        return {
            "kind": "markdown",
            "html": render_markdown(result.markdown),
            "confidence_pct": confidence_pct(result.confidence),
        }

    return {
        "kind": "metrics",
        "food_name": getattr(result, "food_name", None),
        "calories": getattr(result, "calories", None),
        "serving_size": getattr(result, "serving_size", None),
        "confidence_pct": confidence_pct(result.confidence),
    }
