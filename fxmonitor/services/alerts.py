"""In-memory rate alert store.

Alerts live only for the lifetime of the process. Every mutation runs under
one lock so concurrent requests cannot interleave on the list.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Iterable

from fxmonitor.core.exceptions import NotFoundError
from fxmonitor.core.logging import get_logger
from fxmonitor.domain import AlertType, CurrencyAlert, ExchangeRate


logger = get_logger("services.alerts")


def demo_alerts() -> list[CurrencyAlert]:
    """The two sample alerts a fresh dashboard starts with."""
    return [
        CurrencyAlert(
            id="1",
            pair_id="EURUSD",
            type="above",
            target_rate=1.10,
            created_at=datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
        ),
        CurrencyAlert(
            id="2",
            pair_id="GBPUSD",
            type="below",
            target_rate=1.25,
            created_at=datetime(2024, 1, 14, 15, 30, tzinfo=timezone.utc),
        ),
    ]


class AlertStore:
    """Thread-safe list of alerts keyed by id."""

    def __init__(self, alerts: Iterable[CurrencyAlert] = ()) -> None:
        self._alerts: dict[str, CurrencyAlert] = {alert.id: alert for alert in alerts}
        self._lock = threading.Lock()

    def list_alerts(self) -> list[CurrencyAlert]:
        """All alerts, newest first."""
        with self._lock:
            alerts = list(self._alerts.values())
        return sorted(alerts, key=lambda alert: alert.created_at, reverse=True)

    def active(self) -> list[CurrencyAlert]:
        return [alert for alert in self.list_alerts() if alert.is_active]

    def create(self, pair_id: str, type: AlertType, target_rate: float) -> CurrencyAlert:
        alert = CurrencyAlert(
            id=uuid.uuid4().hex,
            pair_id=pair_id,
            type=type,
            target_rate=target_rate,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._alerts[alert.id] = alert
        logger.info(
            "Alert created",
            extra={"alert_id": alert.id, "pair_id": pair_id, "type": type, "target_rate": target_rate},
        )
        return alert

    def update(self, alert_id: str, is_active: bool | None = None) -> CurrencyAlert:
        """Toggle an alert; ``None`` leaves the active flag unchanged."""
        with self._lock:
            alert = self._alerts.get(alert_id)
            if alert is None:
                raise NotFoundError(f"Alert not found: {alert_id}")
            if is_active is not None:
                alert = alert.model_copy(update={"is_active": is_active})
                self._alerts[alert_id] = alert
        return alert

    def delete(self, alert_id: str) -> CurrencyAlert:
        with self._lock:
            alert = self._alerts.pop(alert_id, None)
        if alert is None:
            raise NotFoundError(f"Alert not found: {alert_id}")
        logger.info("Alert deleted", extra={"alert_id": alert_id})
        return alert

    def trigger(self, quotes: Iterable[ExchangeRate]) -> list[CurrencyAlert]:
        """
        Fire every active alert whose threshold the matching quote crosses.

        Fired alerts are stamped with ``triggered_at`` and deactivated.

        Returns:
            The alerts fired by this call
        """
        rates = {quote.id: quote.rate for quote in quotes}
        now = datetime.now(timezone.utc)
        fired: list[CurrencyAlert] = []

        with self._lock:
            for alert_id, alert in self._alerts.items():
                rate = rates.get(alert.pair_id)
                if not alert.is_active or rate is None or not alert.is_met_by(rate):
                    continue
                alert = alert.model_copy(update={"is_active": False, "triggered_at": now})
                self._alerts[alert_id] = alert
                fired.append(alert)

        for alert in fired:
            logger.info(
                "Alert triggered",
                extra={"alert_id": alert.id, "pair_id": alert.pair_id, "rate": rates[alert.pair_id]},
            )
        return fired
