"""
Logging utilities for gateway debugging.

Provides colored console output to trace a request through dispatch and
provider selection.
"""
import json
from datetime import datetime
from typing import Any

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    # Stage colors
    "transport": "\033[94m",  # Blue
    "dispatch": "\033[95m",   # Magenta
    "provider": "\033[96m",   # Cyan
    # Status colors
    "success": "\033[92m",    # Green
    "error": "\033[91m",      # Red
    "warning": "\033[93m",    # Yellow
    "info": "\033[97m",       # White
}


def _colorize(text: str, color: str) -> str:
    """Apply color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def _timestamp() -> str:
    """Get current timestamp."""
    return datetime.now().strftime("%H:%M:%S.%f")[:-3]


def _format_value(value: Any, max_length: int = 200) -> str:
    """Format a value for display, truncating if necessary."""
    if value is None:
        return "None"

    if isinstance(value, (dict, list)):
        try:
            formatted = json.dumps(value, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            formatted = str(value)
    else:
        formatted = str(value)

    if len(formatted) > max_length:
        return formatted[:max_length] + "..."
    return formatted


def log_header(title: str):
    """Log a section header."""
    print(f"\n{'='*60}")
    print(_colorize(f"  {title}", "bold"))
    print(f"{'='*60}")


def log_request(method: str, path: str, status: int | None = None):
    """Log an incoming HTTP request (and its status once known)."""
    line = f"{_timestamp()} {_colorize('[TRANSPORT]', 'transport')} {method} {path}"
    if status is not None:
        color = "success" if status < 400 else "warning" if status < 500 else "error"
        line += f" → {_colorize(str(status), color)}"
    print(line)


def log_operation(operation: str, query: str = None, variables: dict = None):
    """Log which operation a request was classified as."""
    print(f"{_timestamp()} {_colorize('[DISPATCH]', 'dispatch')} {operation}")
    if query:
        flat = " ".join(query.split())
        print(f"  Query: {_colorize(flat[:100] + '...' if len(flat) > 100 else flat, 'info')}")
    if variables:
        print(f"  Variables: {_format_value(variables, 150)}")


def log_decision(decision: str, reason: str = None):
    """Log a routing decision."""
    print(f"  {_colorize('→ Decision:', 'bold')} {decision}")
    if reason:
        print(f"    Reason: {_colorize(reason, 'dim')}")


def log_provider_call(label: str, message: str | None):
    """Log an outbound provider call."""
    preview = _format_value(message, 80)
    print(f"{_timestamp()} {_colorize(f'[PROVIDER:{label.upper()}]', 'provider')} {_colorize('Calling...', 'dim')}")
    print(f"  Message: {preview}")


def log_provider_result(label: str, response: str, success: bool = True):
    """Log a provider result."""
    status = _colorize("✓", "success") if success else _colorize("✗", "error")
    print(f"  {status} {label}: {_format_value(response, 150)}")


def log_error(message: str, exception: Exception = None):
    """Log an error."""
    print(f"{_timestamp()} {_colorize('[ERROR]', 'error')} {message}")
    if exception:
        print(f"  Exception: {_colorize(f'{type(exception).__name__}: {exception}', 'error')}")
