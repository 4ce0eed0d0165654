"""Services for the hosted-model interactions, one upstream call per analysis."""

import logging

from food_analyzer.clients import get_openai_client, get_replicate_client
from food_analyzer.config import (
    BLIP_MODEL,
    DETAILED_MODEL,
    DETAILED_MAX_TOKENS,
    LLAVA_MODEL,
    LLAVA_MAX_TOKENS,
    LLAVA_TEMPERATURE,
)
from food_analyzer.estimator import estimate_calories
from food_analyzer.prompts import BLIP_QUESTION, DETAILED_PROMPT, LLAVA_PROMPT
from food_analyzer.schemas import MarkdownResult, QuickScanResult
from food_analyzer.utils import (
    extract_food_name,
    extract_serving_size,
    join_model_output,
    strip_code_fences,
)

logger = logging.getLogger(__name__)

DETAILED_CONFIDENCE = 0.95
LLAVA_MARKDOWN_CONFIDENCE = 0.9


def _openai_client():
    return get_openai_client()


def _replicate_client():
    return get_replicate_client()


def quick_scan(image: str) -> QuickScanResult:
    """Caption the photo with BLIP-2 and look the caption up in the calorie table."""
    logger.info("Quick scan with model=%s, image_len=%s", BLIP_MODEL, len(image))
    output = _replicate_client().run(
        BLIP_MODEL,
        input={"image": image, "question": BLIP_QUESTION},
    )
    caption = join_model_output(output).strip()
    logger.info("BLIP caption: %s", caption)

    if not caption:
        raise ValueError("Empty caption from BLIP-2")

    food_name = extract_food_name(caption)
    calories, confidence = estimate_calories(food_name)

    return QuickScanResult(
        food_name=food_name,
        calories=calories,
        serving_size=extract_serving_size(caption),
        confidence=confidence,
    )


def detailed_scan(image: str) -> MarkdownResult:
    """Ask the OpenAI vision model for a nutritional breakdown in markdown."""
    logger.info("Detailed scan with model=%s, image_len=%s", DETAILED_MODEL, len(image))
    response = _openai_client().chat.completions.create(
        model=DETAILED_MODEL,
        messages=[
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": DETAILED_PROMPT},
                    {"type": "image_url", "image_url": {"url": image}},
                ],
            }
        ],
        max_tokens=DETAILED_MAX_TOKENS,
    )

    content = response.choices[0].message.content if response.choices else None
    if not content:
        raise ValueError("No response from OpenAI vision model")
    logger.info("Detailed response received, length: %s", len(content))

    return MarkdownResult(markdown=content, confidence=DETAILED_CONFIDENCE)


def llava_scan(image: str) -> MarkdownResult:
    """Ask LLaVA for a descriptive markdown write-up of the dish."""
    logger.info("LLaVA scan with model=%s, image_len=%s", LLAVA_MODEL, len(image))
    output = _replicate_client().run(
        LLAVA_MODEL,
        input={
            "image": image,
            "prompt": LLAVA_PROMPT,
            "temperature": LLAVA_TEMPERATURE,
            "max_tokens": LLAVA_MAX_TOKENS,
        },
    )
    markdown = strip_code_fences(join_model_output(output))
    if not markdown.strip():
        raise ValueError("Empty response from LLaVA")
    logger.info("LLaVA response received, length: %s", len(markdown))

    return MarkdownResult(markdown=markdown, confidence=LLAVA_MARKDOWN_CONFIDENCE)
