"""Output schema for structured dashboard generation.

Expressed in the provider's schema dialect (OpenAPI subset with
upper-case type names). The model is constrained to it at request time;
the client only checks the parsed result against DashboardSpec.
"""

from typing import Any

from ..contracts import ChartType, Trend


def _string(description: str | None = None, enum: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "STRING"}
    if description:
        schema["description"] = description
    if enum:
        schema["enum"] = enum
    return schema


def _array(items: dict[str, Any]) -> dict[str, Any]:
    return {"type": "ARRAY", "items": items}


def dashboard_output_schema() -> dict[str, Any]:
    """Build the schema the dashboard response must conform to.

    A fresh dict is returned on every call so callers may mutate it.
    """
    chart_point = {
        "type": "OBJECT",
        "properties": {
            "name": _string(),
            "value": {"type": "NUMBER"},
            "secondaryValue": {"type": "NUMBER"},
        },
        "required": ["name", "value"],
    }
    metric = {
        "type": "OBJECT",
        "properties": {
            "label": _string(),
            "value": _string(),
            "trend": _string(enum=[t.value for t in Trend]),
            "percentage": _string(),
        },
        "required": ["label", "value", "trend"],
    }
    chart = {
        "type": "OBJECT",
        "properties": {
            "title": _string(),
            "type": _string(enum=[c.value for c in ChartType]),
            "xAxisKey": _string("Key for X axis data (usually name/date)"),
            "dataKey": _string("Key for Y axis data (value)"),
            "data": _array(chart_point),
        },
        "required": ["title", "type", "data", "xAxisKey", "dataKey"],
    }
    return {
        "type": "OBJECT",
        "properties": {
            "title": _string("Dashboard title"),
            "summary": _string("Brief executive summary of the data"),
            "metrics": _array(metric),
            "charts": _array(chart),
        },
        "required": ["title", "summary", "metrics", "charts"],
    }
