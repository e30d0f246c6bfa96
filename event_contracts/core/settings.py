from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

import logging
import os

from event_contracts.contracts.catalog import coerce
from event_contracts.contracts.routing import get_consumer_group_streams
from event_contracts.contracts.services import ServiceName
from event_contracts.contracts.streams import EventStream
from event_contracts.contracts.subscriptions import SubscriptionPlan, build_subscription_plan


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    env: str
    service: ServiceName
    consumer_name_prefix: str
    strict_lookups: bool = False

    def subscription_plan(self) -> SubscriptionPlan:
        # `service` is a validated ServiceName, so a plan always exists.
        return build_subscription_plan(self.service, strict=True)

    def group_streams(self, group: object) -> Tuple[EventStream, ...]:
        """Streams for `group`, honouring `strict_lookups` for unknown group names."""
        return get_consumer_group_streams(group, strict=self.strict_lookups)

    def consumer_name(self, instance: str | int) -> str:
        """Consumer name inside a group, e.g. `hrm-service-0`."""
        return f"{self.consumer_name_prefix}-{instance}"


def _parse_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


def load_settings(path: str | Path = "config/settings.yaml") -> Settings:
    p = Path(path)

    # Keep imports optional at module import time (the lookup API never needs YAML).
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as e:  # pragma: no cover
        raise ModuleNotFoundError(
            "PyYAML is required to load config/settings.yaml. Install with: pip install pyyaml"
        ) from e

    data: Dict[str, Any] = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    # Env overrides (one config file shared by every service in compose).
    env_service = os.getenv("EVENT_CONTRACTS_SERVICE")
    env_name = os.getenv("EVENT_CONTRACTS_ENV")

    raw_service = env_service or data.get("service")
    if not raw_service:
        raise ValueError("service must be set (config `service` or EVENT_CONTRACTS_SERVICE)")
    service = coerce(ServiceName, raw_service)
    if service is None:
        raise ValueError(f"unknown service: {raw_service!r}")

    consumers = data.get("consumers") or {}
    settings = Settings(
        env=env_name or data.get("env", "dev"),
        service=service,
        consumer_name_prefix=consumers.get("name_prefix") or service.value,
        strict_lookups=_parse_bool(consumers.get("strict_lookups", False)),
    )
    logger.info("loaded settings for %s (env=%s) from %s", settings.service.value, settings.env, p)
    return settings
