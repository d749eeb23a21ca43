"""Shape contracts shared by the composer, gateway, validator and panels.

Dashboard models mirror the JSON the model is asked to produce, so field
aliases keep the camelCase wire names while Python code uses snake_case.
They validate in strict mode: a value of the wrong type is a contract
violation, not something to coerce.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

AutomationResult = str


class Trend(str, Enum):
    """Direction of a dashboard metric."""
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class ChartType(str, Enum):
    """Chart kinds the dashboard renderer supports."""
    BAR = "bar"
    LINE = "line"
    AREA = "area"


class Role(str, Enum):
    """Author of a chat message."""
    USER = "user"
    MODEL = "model"


class _Contract(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)


class ChartPoint(_Contract):
    """A single data point of a chart."""

    name: str = Field(description="Category or x-axis label")
    value: float = Field(description="Primary series value")
    secondary_value: float | None = Field(
        default=None,
        alias="secondaryValue",
        description="Optional second series value"
    )


class Chart(_Contract):
    """A chart definition with its data."""

    title: str
    type: ChartType
    x_axis_key: str = Field(alias="xAxisKey", description="Field read for the x axis (usually name/date)")
    data_key: str = Field(alias="dataKey", description="Field read for the y axis (value)")
    data: list[ChartPoint]


class Metric(_Contract):
    """An aggregate headline number."""

    label: str
    value: str
    trend: Trend | None = None
    percentage: str | None = None


class DashboardSpec(_Contract):
    """A generated dashboard: title, summary, metrics and charts."""

    title: str = Field(description="Dashboard title")
    summary: str = Field(description="Brief executive summary of the data")
    metrics: list[Metric]
    charts: list[Chart]


class ChatMessage(_Contract):
    """A message in a chat session.

    Created by the chat panel for each user submission and each model
    reply; never mutated afterwards.
    """

    id: str = Field(description="Identifier unique within the session")
    role: Role
    content: str
    timestamp: int = Field(description="Milliseconds, strictly increasing within the session")


class ChatTurn(_Contract):
    """One turn of the conversation as sent to the model: who said what."""

    role: Role
    text: str
