"""Email notification action builder."""

from __future__ import annotations

from typing import Optional

from .base import ActionBuilder
from .schema import EmailPayload


class EmailActionBuilder(ActionBuilder):
    kind = "email"

    def __init__(self, settings=None) -> None:
        super().__init__(settings)
        self._to: list[str] = []
        self._cc: list[str] = []
        self._bcc: list[str] = []
        self._subject: str = ""
        self._body: str = ""
        self._content_type: Optional[str] = None
        self._attachments: list[str] = []

    def with_recipient(self, address: str) -> EmailActionBuilder:
        self._to.append(address)
        return self

    def with_cc(self, address: str) -> EmailActionBuilder:
        self._cc.append(address)
        return self

    def with_bcc(self, address: str) -> EmailActionBuilder:
        self._bcc.append(address)
        return self

    def with_subject(self, subject: str) -> EmailActionBuilder:
        self._subject = subject
        return self

    def with_body(self, body: str) -> EmailActionBuilder:
        self._body = body
        return self

    def with_content_type(self, content_type: str) -> EmailActionBuilder:
        self._content_type = content_type
        return self

    def with_attachment(self, path: str) -> EmailActionBuilder:
        self._attachments.append(path)
        return self

    def _build_payload(self) -> EmailPayload:
        self._require("to", self._to)
        self._require("subject", self._subject)
        self._require("body", self._body)
        return EmailPayload(
            to=tuple(self._to),
            cc=tuple(self._cc),
            bcc=tuple(self._bcc),
            subject=self._subject,
            body=self._body,
            content_type=self._content_type,
            attachments=tuple(self._attachments),
        )
