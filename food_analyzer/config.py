import os


def _parse_cors_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
REPLICATE_API_TOKEN = os.getenv("REPLICATE_API_TOKEN")
CORS_ORIGINS = _parse_cors_origins(os.getenv("CORS_ORIGINS", "*"))
ALLOW_ALL_ORIGINS = CORS_ORIGINS == ["*"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# -----------------------------------
# Detailed scan (OpenAI vision)
# -----------------------------------

# DETAILED_MODEL: chat model that writes the nutritional markdown
DETAILED_MODEL = os.getenv("DETAILED_MODEL", "gpt-4o")
DETAILED_MAX_TOKENS = int(os.getenv("DETAILED_MAX_TOKENS", "500"))

# -----------------------------------
# Replicate models
# -----------------------------------

# BLIP_MODEL: captioning model behind the quick scan, pinned to a version
BLIP_MODEL = os.getenv(
    "BLIP_MODEL",
    "salesforce/blip-2:4b32258c42e9efd4288bb9910bc532a69727f9acd26aa08e175713a0a857a608",
)

# LLAVA_MODEL: large vision-language model behind the advanced scan
LLAVA_MODEL = os.getenv(
    "LLAVA_MODEL",
    "yorickvp/llava-v1.6-vicuna-13b:0603dec596080fa084e26f0ae6d605fc5788ed2b1a0358cd25010619487eae63",
)
LLAVA_TEMPERATURE = float(os.getenv("LLAVA_TEMPERATURE", "0.5"))
LLAVA_MAX_TOKENS = int(os.getenv("LLAVA_MAX_TOKENS", "500"))
