"""Minimal FastAPI service for postcode format, range and province checks."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from ryandata_postcode_utils import __version__
from ryandata_postcode_utils.models import CheckResult, PostcodeRule, ProvinceInfo
from ryandata_postcode_utils.service import PostcodeService

app = FastAPI(title="RyanData Postcode Utils API", version=__version__)
service = PostcodeService()


class RangeBody(BaseModel):
    start: str
    end: str


class OverlapRequest(BaseModel):
    country_code: str
    ranges: list[RangeBody] = Field(default_factory=list)


def _require_rule(country_code: str) -> PostcodeRule:
    """Resolve a rule or answer 404."""
    rule = service.get_rule(country_code)
    if rule is None:
        raise HTTPException(status_code=404, detail=f"No postcode rule for country: {country_code}")
    return rule


def _format_result(result: CheckResult) -> dict[str, Any]:
    """Normalize CheckResult into a consistent API payload."""
    return result.to_dict()


def _format_province(province: ProvinceInfo) -> dict[str, Any]:
    return {
        "code": province.code,
        "en_name": province.en_name,
        "cn_name": province.cn_name,
        "local_name": province.local_name,
        "aliases": list(province.aliases),
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/rules/{country_code}")
def get_rule(country_code: str) -> dict[str, Any]:
    """Return a country's postcode rule."""
    return _require_rule(country_code).model_dump()


@app.get("/validate")
def validate(
    country_code: str = Query(..., min_length=1),
    postcode: str = Query(...),
) -> dict[str, Any]:
    """Check a postcode against the country's format rule."""
    rule = _require_rule(country_code)
    return _format_result(service.validate_format(rule.country_code, postcode))


@app.get("/in_range")
def in_range(
    country_code: str = Query(..., min_length=1),
    start: str = Query(...),
    end: str = Query(...),
    postcode: str = Query(...),
    apply_format_fix: bool = True,
) -> dict[str, Any]:
    """Check whether a postcode lies inside an inclusive range."""
    rule = _require_rule(country_code)
    result = service.check_in_range(
        rule.country_code, start, end, postcode, apply_format_fix=apply_format_fix
    )
    return _format_result(result)


@app.post("/overlap")
def overlap(request: OverlapRequest) -> dict[str, Any]:
    """Check that no two ranges of a list overlap."""
    rule = _require_rule(request.country_code)
    ranges = [(item.start, item.end) for item in request.ranges]
    return _format_result(service.check_no_overlap(rule.country_code, ranges))


@app.get("/provinces/{country_code}")
def provinces(country_code: str) -> list[dict[str, Any]]:
    """List the provinces of a country (empty if there is no data)."""
    return [_format_province(p) for p in service.get_provinces(country_code)]


@app.get("/province")
def province(
    country_code: str = Query(..., min_length=1),
    query: str = Query(...),
) -> dict[str, Any]:
    """Resolve a province by code, English name or Chinese name."""
    found = service.get_province(country_code, query)
    if found is None:
        raise HTTPException(
            status_code=404, detail=service.check_province(country_code, query).message
        )
    return _format_province(found)


# To run: uvicorn ryandata_postcode_utils.api:app --host 0.0.0.0 --port 8000
