"""Read, fetch and validate question source documents."""
import json
import logging
from pathlib import Path
from typing import Optional

import httpx
import yaml

from js_lab.config import FETCH_TIMEOUT
from js_lab.errors import SourceLoadFailure

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_document(text: str, name: str = "") -> dict:
    """Parse document text as YAML for .yaml/.yml names, JSON otherwise."""
    suffix = Path(name).suffix.lower()
    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise SourceLoadFailure(f"Could not parse {name or 'document'}: {exc}", name) from exc


def validate_document(data, source: str = "") -> dict:
    """Check the top-level schema: {meta, categories: [...], questions: [...]}."""
    if not isinstance(data, dict):
        raise SourceLoadFailure("Question document must be an object", source)
    if not isinstance(data.get("questions"), list):
        raise SourceLoadFailure("Question document has no 'questions' list", source)
    categories = data.get("categories", [])
    if not isinstance(categories, list) or not all(
        isinstance(c, dict) and "id" in c for c in categories
    ):
        raise SourceLoadFailure("'categories' must be a list of objects with an id", source)
    if not isinstance(data.get("meta", {}), dict):
        raise SourceLoadFailure("'meta' must be an object", source)
    if not all(isinstance(q, dict) for q in data["questions"]):
        raise SourceLoadFailure("Every question record must be an object", source)
    return data


def read_document(path: str) -> dict:
    """Read and validate a question document from a local file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceLoadFailure(f"Could not read {path}: {exc}", path) from exc
    return validate_document(parse_document(text, path), path)


async def fetch_document(
    source: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = FETCH_TIMEOUT,
) -> dict:
    """Load a question document from an http(s) URL or a local path."""
    if not is_url(source):
        return read_document(source)
    logger.debug("Fetching question document from %s", source)
    try:
        name = httpx.URL(source).path
        if client is not None:
            response = await client.get(source)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(source)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise SourceLoadFailure(f"Could not fetch {source}: {exc}", source) from exc
    return validate_document(parse_document(response.text, name), source)
