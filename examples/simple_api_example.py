#!/usr/bin/env python3
"""
Example use of the high-level layout API.

Lays out the same short document twice: once onto a recording surface to
inspect the draw commands, once onto a PDF page.
"""

from pathlib import Path

from markup_layout import LayoutConfig, RecordingSurface, render_html, render_to_pdf
from markup_layout.surfaces.recording import FillTextCommand
from markup_layout.utils.rich_logger import configure_rich_logging

DOCUMENT = """
<h1>Layout example</h1>
<p>Water is H<sub>2</sub>O, and Einstein wrote E = mc<sup>2</sup>.
Here we try some <b>bold</b> and <i>italic</i> text, wrapped
at the right edge of a narrow column.</p>
<hr>
<h3>Second section</h3>
<p>Lines break at spaces and after hyphens in long well-known words.</p>
"""


def main():
    configure_rich_logging("INFO")
    config = LayoutConfig(font_size=11.0)

    # 1. Inspect the draw commands
    surface = RecordingSurface.of_size(240, 400)
    end = render_html(surface, DOCUMENT, config=config)
    for command in surface.commands:
        if isinstance(command, FillTextCommand):
            print(f"text  ({command.point.x:6.2f}, {command.point.y:6.2f}) {command.style.font_name:<22} {command.text!r}")
        else:
            print(f"line  ({command.start.x:6.2f}, {command.start.y:6.2f}) -> ({command.end.x:6.2f}, {command.end.y:6.2f})")
    print(f"Cursor ended at ({end.x:.2f}, {end.y:.2f})")

    # 2. Render to PDF
    output = Path("output") / "simple_api_example.pdf"
    output.parent.mkdir(parents=True, exist_ok=True)
    render_to_pdf(DOCUMENT, output, width=300, height=420, config=config, margin=30)
    print(f"PDF written: {output}")


if __name__ == "__main__":
    main()
