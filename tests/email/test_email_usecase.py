"""Tests for the email usecase and queue handler."""

import pytest
from unittest.mock import AsyncMock

from pkg.smtp import IMailSender, SMTPSendError
from internal.email import EmailHandler, ErrInvalidEmailJob, NewEmailUseCase
from internal.model import EmailJob


@pytest.fixture
def sender():
    sender = AsyncMock(spec=IMailSender)
    sender.send.return_value = "<id@example.com>"
    return sender


class TestEmailUseCase:
    @pytest.mark.asyncio
    async def test_send_maps_job_to_message(self, sender, mock_logger):
        usecase = NewEmailUseCase(sender, mock_logger)
        job = EmailJob(
            to="alex@example.com",
            subject="Portfolio Contact: Hi",
            html="<p>Hi</p>",
            text="Hi",
            reply_to="jane@example.org",
        )

        message_id = await usecase.send(job)

        assert message_id == "<id@example.com>"
        message = sender.send.await_args.args[0]
        assert message.to == "alex@example.com"
        assert message.reply_to == "jane@example.org"
        assert message.text == "Hi"

    @pytest.mark.asyncio
    async def test_send_failure_propagates(self, sender):
        sender.send.side_effect = SMTPSendError("relay down")

        with pytest.raises(SMTPSendError):
            await NewEmailUseCase(sender).send(
                EmailJob(to="alex@example.com", subject="s", html="<p/>")
            )

    def test_sender_required(self):
        with pytest.raises(ValueError):
            NewEmailUseCase(None)


class TestEmailHandler:
    @pytest.mark.asyncio
    async def test_handles_wire_payload(self, sender):
        handler = EmailHandler(NewEmailUseCase(sender))

        await handler.handle(
            {"to": "alex@example.com", "subject": "s", "html": "<p/>", "replyTo": "jane@example.org"}
        )

        assert sender.send.await_args.args[0].reply_to == "jane@example.org"

    @pytest.mark.asyncio
    async def test_missing_fields_raise(self, sender):
        handler = EmailHandler(NewEmailUseCase(sender))

        with pytest.raises(ErrInvalidEmailJob):
            await handler.handle({"subject": "no recipient"})
        sender.send.assert_not_called()
