"""Interactive input helpers: menus, confirmations and validated text or number entry."""

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from econobook.cli.display import console, title


def _normalize(choice):
    if isinstance(choice, dict):
        return {"name": choice["name"], "value": choice["value"], "disabled": choice.get("disabled") or False}
    if isinstance(choice, (tuple, list)):
        return {"name": choice[0], "value": choice[1], "disabled": False}
    return {"name": str(choice), "value": choice, "disabled": False}


def select(message, choices, default=None):
    """Numbered menu. Choices are dicts with name/value and an optional "disabled" reason,
    (name, value) pairs, or plain values. Returns the chosen value."""
    options = [_normalize(c) for c in choices]
    if not options:
        raise ValueError("select() needs at least one choice")

    title(message)
    for index, option in enumerate(options, 1):
        if option["disabled"]:
            console.print(f"  [dim]{index}. {option['name']} ({escape(str(option['disabled']))})[/]")
        else:
            console.print(f"  {index}. {option['name']}")

    enabled = [str(i) for i, option in enumerate(options, 1) if not option["disabled"]]
    if not enabled:
        raise ValueError("select() needs at least one enabled choice")

    default_key = next(
        (str(i) for i, option in enumerate(options, 1) if option["value"] == default and not option["disabled"]),
        enabled[0],
    )
    answer = Prompt.ask("Choose", choices=enabled, default=default_key, show_choices=False)
    return options[int(answer) - 1]["value"]


def confirm(message, default=False):
    return Confirm.ask(message, default=default)


def ask_text(message, default="", validate=None):
    """Free text entry. validate(value) returns an error message or None; invalid input is asked again."""
    while True:
        value = Prompt.ask(message, default=default, show_default=bool(default)).strip()
        problem = validate(value) if validate else None
        if not problem:
            return value
        console.print(f"[red]{escape(problem)}[/]")


def ask_list(message, default=None):
    """Comma separated entry returned as a list of non-empty, stripped items."""
    raw = ask_text(f"{message} (comma-separated)", default=", ".join(default or []))
    return [item.strip() for item in raw.split(",") if item.strip()]


def ask_number(message, default=None, minimum=None, maximum=None, integer=False):
    """Numeric entry with an inclusive range check; re-asks until the value parses and is in range."""
    kind = "a whole number" if integer else "a number"
    while True:
        raw = Prompt.ask(message, default=None if default is None else str(default),
                         show_default=default is not None)
        try:
            value = int(raw) if integer else float(raw)
        except (TypeError, ValueError):
            console.print(f"[red]Please enter {kind}.[/]")
            continue
        if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
            console.print(f"[red]Value must be between {minimum} and {maximum}.[/]")
            continue
        return value


def pause(message="Press Enter to continue..."):
    Prompt.ask(message, default="", show_default=False)
