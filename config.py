import os
import random
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ALLOW_ORIGINS = _env_list("CORS_ALLOW_ORIGINS", "*")

# Synthetic fallback scores for documents where subjects were read but marks were not
ENABLE_SYNTHETIC_FALLBACK = _env_bool("GUIDANCE_ENABLE_SYNTHETIC_FALLBACK", True)
_seed = os.getenv("GUIDANCE_SYNTHETIC_SEED")
SYNTHETIC_SEED: Optional[int] = int(_seed) if _seed else None


def synthetic_rng() -> random.Random:
    """Random source for synthetic scores; seeded when GUIDANCE_SYNTHETIC_SEED is set."""
    return random.Random(SYNTHETIC_SEED)
