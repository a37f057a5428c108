"""Helper functions for the contact usecase."""

import html
from typing import Any

from pydantic import ValidationError

from internal.model import EmailJob

from ..constant import *
from ..errors import ErrInvalidSubmission
from ..type import Config, ContactForm


def parse_contact_form(payload: Any) -> ContactForm:
    """Validate a raw submission into a ContactForm.

    Raises:
        ErrInvalidSubmission: With the message matching the first problem
            found (missing field, bad email, anything else)
    """
    if not isinstance(payload, dict):
        raise ErrInvalidSubmission(MSG_VALIDATION_ERROR)

    for field in REQUIRED_FIELDS:
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ErrInvalidSubmission(MSG_REQUIRED_FIELDS)

    try:
        return ContactForm.model_validate(payload)
    except ValidationError as exc:
        bad_fields = {err["loc"][0] for err in exc.errors() if err.get("loc")}
        if "email" in bad_fields:
            raise ErrInvalidSubmission(MSG_INVALID_EMAIL) from exc
        raise ErrInvalidSubmission(MSG_VALIDATION_ERROR) from exc


def render_html(form: ContactForm) -> str:
    message = html.escape(form.message).replace("\n", "<br>")
    return (
        "<h2>New Contact Form Submission</h2>\n"
        f"<p><strong>Name:</strong> {html.escape(form.name)}</p>\n"
        f"<p><strong>Email:</strong> {html.escape(form.email)}</p>\n"
        f"<p><strong>Subject:</strong> {html.escape(form.subject)}</p>\n"
        "<p><strong>Message:</strong></p>\n"
        f"<p>{message}</p>\n"
        "<hr>\n"
        "<p><small>Sent from portfolio contact form</small></p>\n"
    )


def render_text(form: ContactForm) -> str:
    return (
        "New Contact Form Submission\n\n"
        f"Name: {form.name}\n"
        f"Email: {form.email}\n"
        f"Subject: {form.subject}\n\n"
        "Message:\n"
        f"{form.message}\n"
    )


def build_email_job(form: ContactForm, config: Config) -> EmailJob:
    """Email to the site owner describing one submission."""
    return EmailJob(
        to=config.recipient,
        subject=f"{config.subject_prefix}: {form.subject}",
        html=render_html(form),
        text=render_text(form),
        reply_to=form.email,
    )


__all__ = ["parse_contact_form", "render_html", "render_text", "build_email_job"]
