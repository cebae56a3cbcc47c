from contextlib import asynccontextmanager
import logging

from ats_analyzer.core.rules import get_analyzer_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    rules = get_analyzer_rules()
    logger.info(
        "analyzer_rules_loaded curated_terms=%d stopwords=%d duplicate_policy=%s",
        len(rules.curated_terms),
        len(rules.stopwords),
        rules.duplicate_policy,
    )
    yield
