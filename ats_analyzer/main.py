import logging

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from ats_analyzer.api.v1.health import router as health_router
from ats_analyzer.api.v1.analyze import router as analyze_router
from ats_analyzer.core.cors import install_cors
from ats_analyzer.core.rate_limit import limiter
from ats_analyzer.core.config import settings
from ats_analyzer.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="ATS Resume Analyzer API", version="0.1.0", lifespan=lifespan)

install_cors(app)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(analyze_router, prefix="/v1", tags=["Analyze"])
