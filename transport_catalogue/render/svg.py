"""SVG rendering of buses and stops."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from html import escape

from transport_catalogue.core.models import Bus, RenderConfig, Stop
from transport_catalogue.render.projector import Point, SphereProjector, lerp, perpendicular

logger = logging.getLogger(__name__)

EMOJI_FONT = "Segoe UI Emoji, Apple Color Emoji, Noto Color Emoji, sans-serif"
TEXT_FONT = "Verdana"

COLOR_PALETTE = [
    "red", "green", "blue", "orange", "purple",
    "brown", "magenta", "teal", "navy", "gold",
]

BUS_GLYPH = "\U0001f68c"
STOP_GLYPH = "\U0001f68f"

# Stop map header layout
HEADER_TOP_Y = 30.0
TITLE_LINE_HEIGHT = 22.0
SECOND_LINE_HEIGHT = 20.0
LEGEND_LINE_STEP = 18.0
GAP_HEADER_TO_MAP = 25.0
BUS_TITLE_MARGIN = 70.0
STOP_MAP_ROUTE_OFFSET = 3.5


@dataclass
class RouteStyle:
    """Drawing parameters for one route."""

    stroke_color: str = "black"
    stroke_width: float = 3.0
    emoji_sep: float = 12.0
    arrow_along: float = 0.80
    bus_along: float = 0.35
    offset_twoway: float = 10.0
    dt_twoway: float = 0.10
    extra_shift: Point = field(default_factory=Point)


def _num(value: float) -> str:
    return f"{value:.6f}"


def _text(x: float, y: float, size: int, body: str, font: str = TEXT_FONT, fill: str = "") -> str:
    fill_attr = f' fill="{fill}"' if fill else ""
    return (
        f'  <text x="{_num(x)}" y="{_num(y)}" font-size="{size}" '
        f'font-family="{font}"{fill_attr}>{body}</text>\n'
    )


def _open_svg(width: float, height: float) -> list[str]:
    return [
        '<?xml version="1.0" encoding="UTF-8"?>\n',
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
        f'width="{_num(width)}" height="{_num(height)}">\n',
        f'  <rect x="0" y="0" width="{_num(width)}" height="{_num(height)}" fill="white" />\n',
    ]


def _direction_glyph(a: Point, b: Point) -> str:
    dx = b.x - a.x
    dy = b.y - a.y
    if abs(dx) >= abs(dy):
        return "\U0001f449" if dx >= 0 else "\U0001f448"
    return "\U0001f446" if dy <= 0 else "\U0001f447"


def _draw_bus_segments(
    parts: list[str], bus: Bus, proj: SphereProjector, top_margin: float, style: RouteStyle
) -> None:
    """Draw each consecutive stop pair with direction and bus glyphs."""
    stops = bus.stops
    if len(stops) < 2:
        return

    edges = {(stops[i - 1], stops[i]) for i in range(1, len(stops))}

    # First-appearance rank orders the two directions of a shared segment
    rank: dict[Stop, int] = {}
    for stop in stops:
        rank.setdefault(stop, len(rank))

    shift_down = Point(0.0, top_margin)

    for i in range(1, len(stops)):
        src = stops[i - 1]
        dst = stops[i]

        a = proj(src.coordinates) + shift_down
        b = proj(dst.coordinates) + shift_down
        perp = perpendicular(a, b, 1.0)

        two_way = (dst, src) in edges
        canonical = rank[src] <= rank[dst]

        shift = style.extra_shift
        if two_way and not canonical:
            shift = shift + perpendicular(a, b, style.offset_twoway + style.stroke_width * 1.5)

        start = a + shift
        end = b + shift
        parts.append(
            f'  <line x1="{_num(start.x)}" y1="{_num(start.y)}" '
            f'x2="{_num(end.x)}" y2="{_num(end.y)}" stroke="{style.stroke_color}" '
            f'stroke-width="{_num(style.stroke_width)}" '
            f'stroke-linecap="round" stroke-linejoin="round" />\n'
        )

        arrow_t = style.arrow_along
        bus_t = style.bus_along
        if two_way:
            if canonical:
                arrow_t = max(0.05, arrow_t - style.dt_twoway)
                bus_t = max(0.05, bus_t - style.dt_twoway)
            else:
                arrow_t = min(0.95, arrow_t + style.dt_twoway)
                bus_t = min(0.95, bus_t + style.dt_twoway)

        arrow = lerp(a, b, arrow_t) + shift - perp.scale(style.emoji_sep)
        bus_pt = lerp(a, b, bus_t) + shift + perp.scale(style.emoji_sep)

        parts.append(_text(arrow.x, arrow.y, 18, _direction_glyph(a, b), font=EMOJI_FONT))
        parts.append(_text(bus_pt.x, bus_pt.y, 18, BUS_GLYPH, font=EMOJI_FONT))


def _draw_bus_on_stop_map(
    parts: list[str],
    bus: Bus,
    proj: SphereProjector,
    color: str,
    top_margin: float,
    offset_index: int,
) -> None:
    """Draw a bus in its palette color, shifted away from the other buses."""
    stops = bus.stops
    if len(stops) < 2:
        return

    shift_down = Point(0.0, top_margin)
    perp = Point()
    for i in range(1, len(stops)):
        candidate = perpendicular(
            proj(stops[i - 1].coordinates) + shift_down,
            proj(stops[i].coordinates) + shift_down,
            1.0,
        )
        if candidate != Point():
            perp = candidate
            break

    style = RouteStyle(
        stroke_color=color,
        stroke_width=4.0,
        emoji_sep=10.0,
        extra_shift=perp.scale(STOP_MAP_ROUTE_OFFSET * offset_index),
    )
    _draw_bus_segments(parts, bus, proj, top_margin, style)


def _draw_stops(
    parts: list[str],
    stops: Iterable[Stop],
    proj: SphereProjector,
    top_margin: float,
    highlight: Stop | None = None,
    yellow_mode: bool = False,
) -> None:
    """Draw stop markers with glyph and name label."""
    for stop in stops:
        p = proj(stop.coordinates) + Point(0.0, top_margin)
        is_highlight = stop is highlight

        if is_highlight:
            radius, fill, stroke, stroke_width = 9.0, "yellow", "red", 3.0
        elif yellow_mode:
            radius, fill, stroke, stroke_width = 6.0, "yellow", "black", 2.0
        else:
            radius, fill, stroke, stroke_width = 5.0, "white", "black", 2.0

        parts.append(
            f'  <circle cx="{_num(p.x)}" cy="{_num(p.y)}" r="{_num(radius)}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="{_num(stroke_width)}" />\n'
        )
        parts.append(_text(p.x + 10, p.y + 6, 16, STOP_GLYPH, font=EMOJI_FONT))
        parts.append(_text(p.x + 30, p.y - 10, 14, escape(stop.name), fill="black"))


def _draw_header(
    parts: list[str],
    stop: Stop,
    buses: Sequence[Bus],
    width: float,
    padding: float,
    header_height: float,
) -> None:
    """Draw the stop map title and color legend."""
    parts.append(
        f'  <rect x="{_num(padding - 10.0)}" y="{_num(10.0)}" '
        f'width="{_num(width - 2 * padding + 20.0)}" height="{_num(header_height)}" '
        f'fill="white" opacity="0.92" />\n'
    )

    x = padding
    y = HEADER_TOP_Y
    parts.append(_text(x, y, 20, f"Stop: {escape(stop.name)}", fill="black"))

    y += TITLE_LINE_HEIGHT
    parts.append(_text(x, y, 14, "Routes shown in this SVG:", fill="black"))

    y += SECOND_LINE_HEIGHT
    for i, bus in enumerate(buses):
        color = COLOR_PALETTE[i % len(COLOR_PALETTE)]
        parts.append(
            f'  <rect x="{_num(x)}" y="{_num(y - 12)}" width="14" height="14" '
            f'fill="{color}" stroke="black" stroke-width="1" />\n'
        )
        parts.append(_text(x + 20, y, 14, f"Bus {escape(bus.name)}", fill="black"))
        y += LEGEND_LINE_STEP


def _unique(stops: Iterable[Stop]) -> list[Stop]:
    """Distinct stops in first-appearance order."""
    return list(dict.fromkeys(stops))


def render_bus_svg(bus: Bus, config: RenderConfig | None = None) -> str:
    """Render a single bus route as an SVG document."""
    config = config or RenderConfig()

    proj = SphereProjector(
        [stop.coordinates for stop in bus.stops],
        config.width,
        config.height - BUS_TITLE_MARGIN,
        config.padding,
    )

    parts = _open_svg(config.width, config.height)
    _draw_bus_segments(parts, bus, proj, BUS_TITLE_MARGIN, RouteStyle())
    _draw_stops(parts, _unique(bus.stops), proj, BUS_TITLE_MARGIN, yellow_mode=True)
    parts.append(_text(config.padding, 30, 22, f"Bus: {escape(bus.name)}", fill="black"))
    parts.append("</svg>\n")

    logger.debug(f"Rendered bus {bus.name!r} with {len(bus.stops)} stops")
    return "".join(parts)


def render_stop_svg(stop: Stop, buses: Sequence[Bus], config: RenderConfig | None = None) -> str:
    """Render a stop with the given buses passing through it."""
    config = config or RenderConfig()

    header_height = (
        HEADER_TOP_Y + TITLE_LINE_HEIGHT + SECOND_LINE_HEIGHT + len(buses) * LEGEND_LINE_STEP
    )
    top_margin = header_height + GAP_HEADER_TO_MAP

    coords = [stop.coordinates]
    for bus in buses:
        coords.extend(s.coordinates for s in bus.stops)

    proj = SphereProjector(coords, config.width, config.height - top_margin, config.padding)

    parts = _open_svg(config.width, config.height)
    for i, bus in enumerate(buses):
        color = COLOR_PALETTE[i % len(COLOR_PALETTE)]
        _draw_bus_on_stop_map(parts, bus, proj, color, top_margin, i)

    involved = _unique([stop, *(s for bus in buses for s in bus.stops)])
    _draw_stops(parts, involved, proj, top_margin, highlight=stop)
    _draw_header(parts, stop, buses, config.width, config.padding, header_height)
    parts.append("</svg>\n")

    logger.debug(f"Rendered stop {stop.name!r} with {len(buses)} buses")
    return "".join(parts)


def inject_summary(svg: str, score: int) -> str:
    """Insert a score label before the closing ``</svg>`` tag."""
    x = 20.0
    y = 120.0
    addition = (
        "\n  <!-- Score summary -->\n"
        f'  <rect x="{_num(x - 10)}" y="{_num(y - 20)}" width="320" height="34" '
        f'fill="white" opacity="0.85" />\n'
        + _text(x, y, 16, f"Score (sum): {score}", fill="black")
    )

    pos = svg.rfind("</svg>")
    if pos == -1:
        return svg + addition
    return svg[:pos] + addition + svg[pos:]
