from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any

from .errors import ValidationError
from .types import Contact, Message

if TYPE_CHECKING:
    from .client import PingdomClient


def validate_contact(contact: Contact) -> None:
    if not contact.name:
        raise ValidationError("contact name must not be empty")
    if not contact.sms and not contact.email:
        raise ValidationError("contact needs at least one sms or email notification target")
    for target in contact.sms:
        if not target.number or not target.country_code:
            raise ValidationError("sms notification target needs number and country_code")
    for target in contact.email:
        if not target.address:
            raise ValidationError("email notification target needs an address")


def _contact_list(data: dict[str, Any]) -> list[Contact]:
    return [Contact.from_dict(c) for c in data["contacts"]]


def _contact(data: dict[str, Any]) -> Contact:
    return Contact.from_dict(data["contact"])


class ContactService:
    """Alerting contacts under ``/alerting/contacts``."""

    def __init__(self, client: PingdomClient):
        self._client = client

    def list(self) -> builtins.list[Contact]:
        req = self._client.new_request("GET", "/alerting/contacts")
        return self._client.do(req, _contact_list)

    def read(self, contact_id: int) -> Contact:
        req = self._client.new_request("GET", f"/alerting/contacts/{int(contact_id)}")
        return self._client.do(req, _contact)

    def create(self, contact: Contact) -> Contact:
        validate_contact(contact)
        req = self._client.new_json_request("POST", "/alerting/contacts", contact.to_json())
        created = self._client.do(req, _contact)
        created.name = created.name or contact.name
        return created

    def update(self, contact_id: int, contact: Contact) -> Message:
        validate_contact(contact)
        req = self._client.new_json_request("PUT", f"/alerting/contacts/{int(contact_id)}", contact.to_json())
        return self._client.do(req, Message)

    def delete(self, contact_id: int) -> Message:
        req = self._client.new_request("DELETE", f"/alerting/contacts/{int(contact_id)}")
        return self._client.do(req, Message)
