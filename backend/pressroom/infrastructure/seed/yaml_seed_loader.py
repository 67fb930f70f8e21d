"""Seed data loader — reads the initial article set from a YAML file.

Expected layout::

    articles:
      - id: 1
        title: ...
        brief: ...
        article: ...
        image_url: /images/valorant.svg   # optional
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

import yaml

from pressroom.domain.entities import Article

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).resolve().parent / "seed_articles.yaml"


def load_seed_articles(path: str | Path = DEFAULT_SEED_FILE) -> list[Article]:
    """Parse seed articles from ``path``.

    A missing file means no seed data. Malformed entries raise, since a
    broken seed file is a deployment error rather than something to skip.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Seed file not found: %s — starting with no articles", path)
        return []

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    loaded_at = datetime.now(timezone.utc)
    articles = [
        Article(
            id=int(entry["id"]),
            title=entry["title"],
            brief=entry["brief"],
            article=entry["article"],
            image_url=entry.get("image_url"),
            created_at=entry.get("created_at") or loaded_at,
        )
        for entry in data.get("articles", [])
    ]
    logger.info("Loaded %d seed articles from %s", len(articles), path)
    return articles
