from fasthtml.common import *

from oopshowcase.mail import has_header_injection, is_valid_email, mailer, sanitize_email

QUESTION = "Write a function that sanitizes email input and validates it before sending."

NO_REPLY = "no-reply@example.com"


def send_safe_email(email, subject, message):
    email = sanitize_email(email)

    if not is_valid_email(email):
        return "Invalid email format."

    if has_header_injection(email, subject):
        return "Email headers contain invalid characters."

    headers = {"From": NO_REPLY, "Reply-To": NO_REPLY}
    if mailer.send(email, subject, message, headers):
        return f"Email sent successfully to {email}."
    return "Failed to send email."


def render():
    yield H4(QUESTION)
    yield Div(cls="row")(
        Div(cls="col-6 text-center")(
            P(send_safe_email("test@example.com", "Welcome!", "Hello, welcome to our platform!")),
        ),
    )
