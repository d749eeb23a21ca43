"""Rich renderables for dashboards and chat messages."""

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..contracts import Chart, ChatMessage, DashboardSpec, Metric, Role, Trend

BAR_WIDTH = 30

_TREND_STYLE = {
    Trend.UP: ("green", "▲"),
    Trend.DOWN: ("red", "▼"),
    Trend.NEUTRAL: ("dim", "–"),
}


def _trend_cell(metric: Metric) -> Text:
    style, icon = _TREND_STYLE.get(metric.trend, ("dim", "–"))
    label = f"{icon} {metric.percentage}" if metric.percentage else icon
    return Text(label, style=style)


def render_metrics(metrics: list[Metric]) -> Table:
    table = Table(title="Key Metrics", title_justify="left")
    table.add_column("Metric", style="bold cyan")
    table.add_column("Value", style="bold")
    table.add_column("Trend")
    for metric in metrics:
        table.add_row(Text(metric.label), Text(metric.value), _trend_cell(metric))
    return table


def render_chart(chart: Chart) -> Table:
    """Render a chart as a table with bars proportional to the data values."""
    table = Table(title=f"{escape(chart.title)} ({chart.type.value})", title_justify="left")
    table.add_column(escape(chart.x_axis_key), style="cyan")
    table.add_column(escape(chart.data_key), justify="right")
    table.add_column("", no_wrap=True)

    peak = max((abs(point.value) for point in chart.data), default=0)
    for point in chart.data:
        width = round(abs(point.value) / peak * BAR_WIDTH) if peak else 0
        style = "red" if point.value < 0 else "green"
        table.add_row(Text(point.name), f"{point.value:g}", Text("█" * width, style=style))
    return table


def render_dashboard(dashboard: DashboardSpec) -> RenderableType:
    parts: list[RenderableType] = [
        Panel(Text(dashboard.summary), title=f"[bold]{escape(dashboard.title)}[/bold]", border_style="cyan"),
        render_metrics(dashboard.metrics),
    ]
    parts.extend(render_chart(chart) for chart in dashboard.charts)
    return Group(*parts)


def render_message(message: ChatMessage) -> RenderableType:
    if message.role == Role.USER:
        return Text.assemble(("You: ", "bold cyan"), message.content)
    return Panel(Markdown(message.content), title="Gemini", title_align="left", border_style="magenta")
