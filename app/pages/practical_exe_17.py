from fasthtml.common import *

from oopshowcase.mail import mailer

QUESTION = "Write a script to send a test email to a user."

TO = "recipient@example.com"
SUBJECT = "Test Email"
MESSAGE = "This is a test email sent from a Python script."
HEADERS = {"From": "sender@example.com"}


def render():
    yield H4(QUESTION)

    if mailer.send(TO, SUBJECT, MESSAGE, HEADERS):
        yield P(f"Email successfully sent to {TO}")
    else:
        yield P("Email sending failed.")
