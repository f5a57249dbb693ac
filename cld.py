# Renders the Drifting Goals causal loop diagram (homelessness response) to a PNG.
# Run this script in a local Python environment.

from pathlib import Path
import sys

from causal_loop import DiagramError, RenderConfig, render_to_file
from causal_loop.drifting_goals import drifting_goals_diagram

# ----- USER CONFIG -----
OUTPUT_FILE = Path('causal_loop_diagram.png')
DPI = 100
SHOW = False  # also open the diagram in a window (needs an interactive matplotlib backend)
# ------------------------


def main(output_file: Path = OUTPUT_FILE, dpi: int = DPI, show: bool = SHOW):
    try:
        diagram = drifting_goals_diagram(RenderConfig(dpi=dpi))
    except DiagramError as e:
        print(f'Diagram definition is invalid: {e}')
        sys.exit(1)

    result = render_to_file(diagram, output_file, show=show)
    print(f'Drew {len(result.nodes)} nodes and {len(result.edges)} edges')
    print(f'Saved diagram: {output_file}')
    return result


if __name__ == '__main__':
    main()
