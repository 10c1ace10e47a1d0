"""Demonstration module for mdoverlay."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

from mdoverlay import RenderOptions, render_markdown
from mdoverlay.renderers import JsonLinesSink

document = """# Release notes

- [x] Box-drawn tables
- [ ] Setext heading glyphs
- Nested:
  - bullets cycle by depth

> [!TIP]
> Callout quotes pick their own style.

| Option      | Default |
|-------------|---------|
| table_style | full    |
"""

# Narrow bullets, and tables redrawn without the top and bottom borders
options = RenderOptions(bullets=("•", "◦", "▪"), table_style="normal")

# Stream each decoration as a JSON line while collecting them
decorations = render_markdown(document, options, width=60, sink=JsonLinesSink(sys.stdout))

print(f"{len(decorations)} decorations", file=sys.stderr)
