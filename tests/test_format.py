from datetime import datetime, timezone
from tintlog.core import styles
from tintlog.logger.format import format_message
from tintlog.logger.options import LoggerOptions

FIXED_NOW = datetime(2024, 1, 15, 20, 30, 45, tzinfo=timezone.utc)
STAMP = "[2024-01-15 12:30:45 PM]"

def _opts(**kw):
    opts = LoggerOptions()
    opts.merge(kw)
    return opts


def test_minimal_line(no_color):
    assert format_message("info", "hello", None, _opts(), "", FIXED_NOW) == f"{STAMP} [INFO] hello"


def test_full_segment_order(no_color):
    opts = _opts(component={"id": "svc"})
    line = format_message("warn", "disk low", "System", opts, "A", FIXED_NOW)
    assert line == f"[A] {STAMP} [WARN] [System] [svc] disk low"


def test_unknown_context_is_unstyled(with_color):
    line = format_message("debug", "m", "Kafka", _opts(), "", FIXED_NOW)
    assert "[Kafka]" in line


def test_level_and_context_colors(with_color):
    line = format_message("error", "boom", "Redis", _opts(), "", FIXED_NOW)
    assert styles.bright_red("[ERROR]") in line
    # Context is styled inside its brackets
    assert "[" + styles.red("Redis") + "]" in line
    assert line.endswith(" boom")


def test_prefix_override_and_default(with_color):
    default = format_message("info", "m", None, _opts(), "P", FIXED_NOW)
    assert default.startswith(styles.bright_blue("[P]"))
    custom = format_message("info", "m", None, _opts(colorized={"P": "green"}), "P", FIXED_NOW)
    assert custom.startswith(styles.green("[P]"))


def test_custom_context_and_component_colors(with_color):
    opts = _opts(context_colors={"System": "cyan"}, component={"id": "db", "name": "Database"},
                 default_component_color="yellow")
    line = format_message("info", "m", "System", opts, "", FIXED_NOW)
    assert "[" + styles.colored_text("System", "cyan") + "]" in line
    assert styles.colored_text("[Database]", "yellow") in line


def test_timezone_suffix(no_color):
    line = format_message("info", "m", None, _opts(timezone=True), "", FIXED_NOW)
    assert "[2024-01-15 12:30:45 PM PST]" in line


def test_message_kept_verbatim(with_color):
    msg = "50% [done] {x}"
    line = format_message("info", msg, None, _opts(), "", FIXED_NOW)
    assert line.endswith(" " + msg)
