import json
import math
import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hexgeo import FILL, diagnostics_report, generate
from hexgeo.logging_config import setup_logging


def main() -> None:
    setup_logging()
    mesh = generate(10, 3, math.pi / 2, FILL)
    if mesh is None:
        raise SystemExit(1)

    print("Vertices:", mesh.vertex_count())
    print("Triangles:", mesh.triangle_count())
    print(json.dumps(diagnostics_report(mesh), indent=2))

    # Invalid input is logged and returns None.
    print("Negative size rejected:", generate(-1) is None)


if __name__ == "__main__":
    main()
