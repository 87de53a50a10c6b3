from __future__ import annotations

import logging

from fastapi import FastAPI, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .recommendations.cache import get_cache_stats
from .recommendations.catalog import get_catalog
from .recommendations.config import DEFAULT_ENGINE_CONFIG
from .recommendations.engine import get_recommended_items, resolve_trip_type
from .recommendations.models import (
    ChecklistCategoryOut,
    ChecklistItemOut,
    ChecklistRequest,
    ChecklistResponse,
    TripContext,
    TripInfo,
)

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    "missing_fields": {
        "en": "Please provide all required fields",
        "zh": "请提供所有必需的信息",
    },
    "invalid_request": {
        "en": "Invalid request parameters",
        "zh": "请求参数无效",
    },
    "server_error": {
        "en": "Server Error",
        "zh": "服务器错误，请稍后重试",
    },
    "rate_limited": {
        "en": "Too many requests, please try again later.",
        "zh": "请求过于频繁，请稍后再试",
    },
}

REQUIRED_CHECKLIST_FIELDS = [
    field.alias or name
    for name, field in ChecklistRequest.model_fields.items()
    if field.is_required()
]

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[DEFAULT_ENGINE_CONFIG.rate_limit],
    headers_enabled=True,
)

app = FastAPI(title="PackMoji API", version="1.0.0")
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _request_lang(accept_language: str | None) -> str:
    """First language tag of an Accept-Language header, e.g. ``zh-CN``."""
    if not accept_language:
        return DEFAULT_ENGINE_CONFIG.default_lang
    first = accept_language.split(",")[0].split(";")[0].strip()
    return first or DEFAULT_ENGINE_CONFIG.default_lang


def error_message(key: str, lang: str) -> str:
    messages = ERROR_MESSAGES[key]
    return messages["zh"] if lang.lower().startswith("zh") else messages["en"]


# ── Error handlers ───────────────────────────────────────────────────────


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed checklist requests with a 400 in the caller's language.

    Missing fields get the ``details`` map (field -> missing?). Any other
    validation failure lists the validator messages under ``errors``.
    """
    lang = _request_lang(request.headers.get("accept-language"))
    errors = exc.errors()

    missing: set[str] = set()
    for err in errors:
        if err["type"] != "missing" or not err["loc"] or err["loc"][0] != "body":
            continue
        if len(err["loc"]) == 1:
            missing.update(REQUIRED_CHECKLIST_FIELDS)
        else:
            missing.add(str(err["loc"][-1]))

    if missing:
        return JSONResponse(
            status_code=400,
            content={
                "msg": error_message("missing_fields", lang),
                "details": {field: field in missing for field in REQUIRED_CHECKLIST_FIELDS},
            },
        )
    return JSONResponse(
        status_code=400,
        content={
            "msg": error_message("invalid_request", lang),
            "errors": [err["msg"] for err in errors],
        },
    )


def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    # SlowAPIMiddleware calls this synchronously
    lang = _request_lang(request.headers.get("accept-language"))
    logger.warning("Rate limit exceeded for %s: %s", get_remote_address(request), exc.detail)
    response = JSONResponse(status_code=429, content={"msg": error_message("rate_limited", lang)})
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)


app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "PackMoji API is running!"


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    catalog = get_catalog()
    return {
        "activities": catalog.activity_tags(),
        "categories": catalog.categories(),
        "total_items": len(catalog),
    }


@app.post("/api/v1/generate-checklist", response_model=ChecklistResponse)
def generate_checklist(
    body: ChecklistRequest,
    accept_language: str | None = Header(default=None),
):
    lang = _request_lang(accept_language)
    trip_type = resolve_trip_type(body.origin_country, body.destination_country)
    logger.info(
        "Trip type determined: %s to %s is %s",
        body.origin_country, body.destination_country, trip_type,
    )

    context = TripContext(
        duration_days=body.duration_days,
        avg_temp=body.avg_temp,
        weather_code=body.weather_code,
        activities=frozenset(body.activities),
        lang=lang,
        trip_type=trip_type,
        origin_country=body.origin_country.upper(),
        destination=body.destination,
    )

    try:
        groups = get_recommended_items(context)
    except Exception as exc:
        # DataIntegrityError lands here too; its message names the item
        logger.exception("Checklist generation failed for %s", body.destination)
        return JSONResponse(
            status_code=500,
            content={"msg": error_message("server_error", lang), "error": str(exc)},
        )

    categories = [
        ChecklistCategoryOut(
            category=group.group,
            items=[
                ChecklistItemOut(
                    id=item.id,
                    name=item.name,
                    emoji=item.emoji,
                    quantity=item.quantity,
                    note=item.note,
                    url=item.url,
                    category=group.group,
                )
                for item in group.items
            ],
        )
        for group in groups
    ]

    condition = body.weather_condition or body.weather_code
    return ChecklistResponse(
        trip_info=TripInfo(
            destination_name=body.destination,
            duration_days=body.duration_days,
            weather_summary=f"{condition}, {body.avg_temp:g}°C",
            trip_type=trip_type,
        ),
        categories=categories,
    )


# ── Operational endpoints ────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
