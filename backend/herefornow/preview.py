"""HTML preview sheet — one card per rendered presence state."""

from __future__ import annotations

import html
from dataclasses import dataclass

from herefornow.codec.amounts import format_amount
from herefornow.codec.b64 import b64encode
from herefornow.codec.metadata import SVG_URI_PREFIX
from herefornow.codec.renderer import Renderer

DEFAULT_STATES = [0, 1, 3, 5, 10, 20, 50, 100, 200, 300, 400, 418, 500, 598]

_STYLE = """
    * { box-sizing: border-box; }
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      background-color: #1a1a1a; color: #ffffff; margin: 0; padding: 40px;
    }
    h1 { text-align: center; font-weight: 300; font-size: 2.5rem; margin-bottom: 10px; }
    .subtitle { text-align: center; color: #888; margin-bottom: 40px; }
    .description {
      max-width: 800px; margin: 0 auto 50px auto; text-align: center;
      color: #aaa; line-height: 1.6; white-space: pre-line;
    }
    .grid {
      display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
      gap: 30px; max-width: 1800px; margin: 0 auto;
    }
    .state { background: #0a0a0a; border-radius: 12px; overflow: hidden; border: 1px solid #333; }
    .state img { width: 100%; height: auto; display: block; }
    .state-info { padding: 20px; border-top: 1px solid #333; }
    .state-name { font-size: 1.1rem; font-weight: 500; margin-bottom: 8px; }
    .state-details { color: #888; font-size: 0.9rem; }
"""


@dataclass
class PreviewState:
    presence_count: int
    held_amount: int | None = None

    @property
    def label(self) -> str:
        noun = "participant" if self.presence_count == 1 else "participants"
        return f"{self.presence_count} {noun}"


def _card(state: PreviewState, renderer: Renderer) -> str:
    svg = renderer.svg(state.presence_count)
    src = SVG_URI_PREFIX + b64encode(svg.encode("utf-8"))
    details = [f"{state.presence_count} active participants"]
    if state.held_amount is not None:
        held = format_amount(state.held_amount, unit=renderer.config.unit_label)
        details.append(f"{held} held")
    label = html.escape(state.label)
    return (
        '<div class="state">'
        f'<img src="{src}" alt="{label}"/>'
        '<div class="state-info">'
        f'<div class="state-name">{label}</div>'
        f'<div class="state-details">{"<br>".join(html.escape(d) for d in details)}</div>'
        "</div></div>"
    )


def render_preview_html(states: list[PreviewState], renderer: Renderer) -> str:
    """Standalone HTML page; every image is inlined as a data URI."""
    name = html.escape(renderer.config.name)
    description = html.escape(renderer.config.description)
    cards = "\n".join(_card(s, renderer) for s in states)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n<head>\n<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{name} - State Preview</title>\n"
        f"<style>{_STYLE}</style>\n</head>\n<body>\n"
        f"<h1>{name}</h1>\n"
        '<p class="subtitle">State Visualization</p>\n'
        f'<p class="description">{description}</p>\n'
        f'<div class="grid">\n{cards}\n</div>\n'
        "</body>\n</html>\n"
    )
