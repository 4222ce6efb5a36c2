import tomllib
from datetime import datetime
from pathlib import Path

from flask import Flask, render_template

NUM1 = 10
NUM2 = 5
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ClockUnavailable(EnvironmentError):
    pass


def configure(config, path):
    """Apply the server defaults, then override them from an optional TOML file."""
    config.update(
        HOST="0.0.0.0",
        PORT=5000,
        CLOCK=datetime.now,
    )
    config.from_file(path, load=tomllib.load, text=False, silent=True)


app = Flask(__name__)
configure(app.config, Path(app.root_path) / "config.toml")


def format_timestamp(moment):
    return moment.strftime(TIMESTAMP_FORMAT)


def add_numbers(a, b):
    return a + b


def read_clock(clock):
    """Call the time source, reporting any failure as ClockUnavailable."""
    try:
        return clock()
    except (OSError, OverflowError, ValueError) as exc:
        raise ClockUnavailable("time source could not be read") from exc


def render_page(moment):
    current_datetime = format_timestamp(moment)
    total = add_numbers(NUM1, NUM2)
    app.logger.debug("rendering page at %s (sum=%d)", current_datetime, total)
    return render_template("time.html", current_datetime=current_datetime, total=total)


@app.route("/")
def index():
    moment = read_clock(app.config["CLOCK"])
    return render_page(moment)


@app.errorhandler(ClockUnavailable)
def clock_unavailable(error):
    app.logger.exception("failed to read clock: %s", error)
    return "Internal Server Error: time source could not be read", 500, {
        "Content-Type": "text/plain; charset=utf-8"
    }


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"])
