import logging
from functools import lru_cache

from openai import OpenAI
import replicate

from food_analyzer.config import OPENAI_API_KEY, REPLICATE_API_TOKEN

logger = logging.getLogger(__name__)


@lru_cache
def get_openai_client() -> OpenAI:
    if not OPENAI_API_KEY:
        raise RuntimeError("OPENAI_API_KEY is not set")
    logger.info("Initializing OpenAI client")
    return OpenAI(api_key=OPENAI_API_KEY)


@lru_cache
def get_replicate_client() -> replicate.Client:
    if not REPLICATE_API_TOKEN:
        raise RuntimeError("REPLICATE_API_TOKEN is not set")
    logger.info("Initializing Replicate client")
    return replicate.Client(api_token=REPLICATE_API_TOKEN)
