"""Terminal output helpers built on rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()

SYMBOLS = {
    "error": "✗",
    "warning": "○",
    "success": "✓",
    "info": "ℹ",
    "bullet": "•",
    "progress": "...",
}

STATUS_STYLES = {
    "not_generated": "grey50",
    "generated": "yellow",
    "wip": "blue",
    "accepted": "green",
}


def header(text):
    console.print(f"\n[bold blue]{escape(text)}[/]\n")


def title(text):
    console.print(f"[bold cyan]{escape(text)}[/]")


def label(text):
    return f"[cyan]{escape(text)}[/]"


def success(message):
    console.print(f"[green]{SYMBOLS['success']}[/] {escape(message)}")


def error(message, details=None):
    console.print(f"[red]{SYMBOLS['error']}[/] {escape(message)}")
    if details is not None:
        console.print(f"[dim red]{escape(str(details))}[/]")


def warning(message):
    console.print(f"[yellow]{SYMBOLS['warning']}[/] {escape(message)}")


def info(message, markup=False):
    # markup=True lets callers pass pre-built label()/status_tag() fragments
    body = message if markup else escape(message)
    console.print(f"[blue]{SYMBOLS['info']}[/] {body}")


def progress(message):
    console.print(f"[blue]{SYMBOLS['progress']}[/] {escape(message)}")


def blank():
    console.print("")


def list_item(item):
    console.print(f"  [grey50]{SYMBOLS['bullet']}[/] {escape(item)}")


def with_explanation(main_text, explanation):
    return f"{escape(main_text)} [grey50]({escape(explanation)})[/]"


def status_tag(status):
    style = STATUS_STYLES.get(status, "white")
    return f"[{style}]{escape(status)}[/]"


def format_chapter(topic, status):
    if status == "accepted":
        return f"[green]{SYMBOLS['success']}[/] {escape(topic)}"
    elif status == "not_generated":
        return f"[grey50]{escape(topic)} ({status})[/]"
    return f"{escape(topic)} ({status_tag(status)})"


def show_text(text, heading=None):
    """Print generated prose or a prompt verbatim inside a panel."""
    console.print(Panel(escape(text or ""), title=escape(heading) if heading else None, border_style="cyan"))
