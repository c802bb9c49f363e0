#!/usr/bin/env python3
"""Demo script for htmlform.

This script builds a signup form, renders it empty, then simulates a
submission and shows:
1. Validation errors for the submitted data
2. Honeypot detection
3. Repopulation of submitted values from the session

Usage:
    python scripts/demo.py [--bot] [--highlight]
"""

import argparse
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from htmlform import Form, RequestContext

console = Console()


def build_signup_form(request: RequestContext, session: dict) -> Form:
    """Build the demo signup form."""
    form = Form(
        {"identifier": "signup", "before_element": "<div>", "after_element": "</div>"},
        request=request,
        session=session,
    )
    form.add_textbox("username", "Username", {"required": True})
    form.add_email("email", "Email", {"required": True})

    address = form.add_fieldset("Address")
    address.add_textbox("city", "City").add_select(
        "country", "Country", {"nz": "New Zealand", "se": "Sweden"}, {"default_value": "nz"}
    )

    form.add_checkbox("interests", "Interests", ["Forms", "HTML", "Python"])
    form.add_honeypot()
    form.add_submit("save", "Sign up")
    return form


def show(title: str, html: str, highlight: bool) -> None:
    body = Syntax(html, "html", word_wrap=True) if highlight else html
    console.print(Panel(body, title=title, border_style="cyan"))


def main() -> None:
    parser = argparse.ArgumentParser(description="htmlform demo")
    parser.add_argument("--bot", action="store_true", help="Fill in the honeypot field")
    parser.add_argument("--highlight", action="store_true", help="Syntax-highlight HTML")
    args = parser.parse_args()

    session: dict = {}

    form = build_signup_form(RequestContext(path="/signup"), session)
    show("Empty form", form.render(), args.highlight)

    submitted = {"username": "", "email": "not-an-email", "interests": ["HTML", "Python"]}
    if args.bot:
        submitted[form.honeypot_name] = "http://spam.example"

    form = build_signup_form(RequestContext(method="POST", path="/signup", body=submitted), session)
    valid = form.is_valid()
    console.print(f"\nValid: [bold]{valid}[/bold]  Passed honeypot: [bold]{form.passed_honeypot()}[/bold]")
    show("After submission", form.render(), args.highlight)

    # next request: no body, values come back from the session
    form = build_signup_form(RequestContext(path="/signup"), session)
    show("Repopulated from session", form.render(), args.highlight)


if __name__ == "__main__":
    main()
