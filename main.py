"""Entry point for the procedural creature demo."""

import sys

from creature.config import settings
from creature.simulation.loop import run


if __name__ == "__main__":
    runtime_settings = settings.load_runtime_settings(sys.argv[1:])
    settings.apply_runtime_settings(runtime_settings)
    run(runtime_settings)
