from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any

from .errors import ValidationError
from .types import IntegrationStatus, WebhookIntegration

if TYPE_CHECKING:
    from .client import PingdomClient

INTEGRATION_PATH = "/data/v3/integration"


def validate_webhook(integration: WebhookIntegration) -> None:
    if not integration.name:
        raise ValidationError("integration name must not be empty")
    if not integration.url.startswith(("http://", "https://")):
        raise ValidationError(f"invalid webhook url {integration.url!r}")


def _integration_list(data: dict[str, Any]) -> list[WebhookIntegration]:
    return [WebhookIntegration.from_dict(i) for i in data["integration"]]


def _integration(data: dict[str, Any]) -> WebhookIntegration:
    return WebhookIntegration.from_dict(data["integration"])


class IntegrationService:
    """Webhook integrations on the my.pingdom.com data API."""

    def __init__(self, client: PingdomClient):
        self._client = client

    def list(self) -> builtins.list[WebhookIntegration]:
        req = self._client.new_request("GET", INTEGRATION_PATH)
        return self._client.do(req, _integration_list)

    def read(self, integration_id: int) -> WebhookIntegration:
        req = self._client.new_request("GET", f"{INTEGRATION_PATH}/{int(integration_id)}")
        return self._client.do(req, _integration)

    def create(self, integration: WebhookIntegration) -> IntegrationStatus:
        validate_webhook(integration)
        req = self._client.new_json_request("POST", INTEGRATION_PATH, integration.to_json())
        return self._client.do(req, IntegrationStatus)

    def update(self, integration_id: int, integration: WebhookIntegration) -> IntegrationStatus:
        validate_webhook(integration)
        req = self._client.new_json_request("PUT", f"{INTEGRATION_PATH}/{int(integration_id)}", integration.to_json())
        return self._client.do(req, IntegrationStatus)

    def delete(self, integration_id: int) -> IntegrationStatus:
        req = self._client.new_request("DELETE", f"{INTEGRATION_PATH}/{int(integration_id)}")
        return self._client.do(req, IntegrationStatus)
