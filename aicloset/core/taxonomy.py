import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

TAXONOMY_PATH = Path(__file__).resolve().parent.parent / "taxonomy.v1.json"

@lru_cache(maxsize=1)
def get_taxonomy() -> Dict[str, Any]:
    with open(TAXONOMY_PATH, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data

def allowed_values(facet: str) -> List[str]:
    taxonomy = get_taxonomy()
    return taxonomy["facets"][facet]["values"]

def neutral_colors() -> List[str]:
    return get_taxonomy()["neutral_colors"]

def color_aliases() -> Dict[str, str]:
    return get_taxonomy()["color_aliases"]

def color_rgb() -> Dict[str, List[int]]:
    return get_taxonomy()["color_rgb"]

def category_keywords() -> Dict[str, List[str]]:
    return get_taxonomy()["category_keywords"]

def style_keywords() -> Dict[str, List[str]]:
    return get_taxonomy()["style_keywords"]

def rain_gear_keywords() -> List[str]:
    return get_taxonomy()["rain_gear_keywords"]
