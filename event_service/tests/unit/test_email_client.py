from __future__ import annotations

import smtplib

from shared.utils import email_client
from shared.utils.email_client import EmailClient


class FakeSMTP:
    """Records what the client sends; fails the first ``failures`` connections."""

    instances: list["FakeSMTP"] = []
    failures = 0

    def __init__(self, host, port) -> None:
        if FakeSMTP.failures:
            FakeSMTP.failures -= 1
            raise OSError("connection refused")
        self.host = host
        self.port = port
        self.logged_in = None
        self.sent = []
        FakeSMTP.instances.append(self)

    def starttls(self) -> None:
        pass

    def login(self, username, password) -> None:
        self.logged_in = (username, password)

    def send_message(self, msg) -> None:
        self.sent.append(msg)

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        pass


def make_client(monkeypatch, failures: int = 0) -> EmailClient:
    FakeSMTP.instances = []
    FakeSMTP.failures = failures
    monkeypatch.setattr(email_client.smtplib, "SMTP", FakeSMTP)
    return EmailClient("smtp.example.com", 587, "mailer", "secret", retry_delay=0)


def test_sends_text_and_html_parts(monkeypatch) -> None:
    client = make_client(monkeypatch)

    sent = client.send_email(sender="events@example.com", recipients=["lee@example.com"],
                             subject="You're invited", text_body="Hi Lee", html_body="<p>Hi Lee</p>")

    assert sent is True
    server = FakeSMTP.instances[0]
    assert server.logged_in == ("mailer", "secret")
    msg = server.sent[0]
    assert msg["To"] == "lee@example.com"
    assert msg.get_body(preferencelist=("html",)).get_content().strip() == "<p>Hi Lee</p>"


def test_retries_transient_failures(monkeypatch) -> None:
    client = make_client(monkeypatch, failures=2)

    assert client.send_email(sender="a@example.com", recipients=["b@example.com"],
                             subject="s", text_body="t") is True
    assert len(FakeSMTP.instances) == 1


def test_gives_up_after_max_retries(monkeypatch) -> None:
    client = make_client(monkeypatch, failures=5)

    assert client.send_email(sender="a@example.com", recipients=["b@example.com"],
                             subject="s", text_body="t") is False


def test_authentication_failure_is_not_retried(monkeypatch) -> None:
    client = make_client(monkeypatch)

    def refuse(self, username, password):
        raise smtplib.SMTPAuthenticationError(535, b"bad credentials")

    monkeypatch.setattr(FakeSMTP, "login", refuse)

    assert client.send_email(sender="a@example.com", recipients=["b@example.com"],
                             subject="s", text_body="t") is False
    assert len(FakeSMTP.instances) == 1
