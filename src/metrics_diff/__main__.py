"""Allow ``python -m metrics_diff``."""

from .cli import app
from .cli._common import PROG_NAME

if __name__ == "__main__":
    app(prog_name=PROG_NAME)
