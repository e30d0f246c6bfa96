from __future__ import annotations

from pathlib import Path

import pytest

from event_contracts.contracts.consumers import ConsumerGroup
from event_contracts.contracts.errors import UnknownIdentifierError
from event_contracts.contracts.routing import get_consumer_group_streams
from event_contracts.contracts.services import ServiceName
from event_contracts.core.settings import load_settings


REPO_SETTINGS = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EVENT_CONTRACTS_SERVICE", raising=False)
    monkeypatch.delenv("EVENT_CONTRACTS_ENV", raising=False)


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "settings.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_shipped_settings_load() -> None:
    s = load_settings(REPO_SETTINGS)
    assert s.env == "dev"
    assert s.service is ServiceName.HRM_SERVICE
    assert s.consumer_name(0) == "hrm-service-0"
    assert s.strict_lookups is False


def test_defaults_and_plan(tmp_path: Path) -> None:
    s = load_settings(_write(tmp_path, "service: payment-service\n"))
    assert s.env == "dev"
    assert s.consumer_name_prefix == "payment-service"
    plan = s.subscription_plan()
    assert [sub.group for sub in plan.groups] == [
        ConsumerGroup.PAYMENT_PROCESSORS,
        ConsumerGroup.ANALYTICS_PROCESSORS,
        ConsumerGroup.AUDIT_PROCESSORS,
    ]


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENT_CONTRACTS_SERVICE", "transport-service")
    monkeypatch.setenv("EVENT_CONTRACTS_ENV", "staging")
    s = load_settings(_write(tmp_path, "env: dev\nservice: hrm-service\n"))
    assert s.service is ServiceName.TRANSPORT_SERVICE
    assert s.env == "staging"


def test_strict_lookups_flag(tmp_path: Path) -> None:
    s = load_settings(
        _write(tmp_path, "service: gateway-service\nconsumers:\n  name_prefix: gw\n  strict_lookups: 'yes'\n")
    )
    assert s.strict_lookups is True
    assert s.consumer_name("a") == "gw-a"
    assert s.group_streams("file-processors") == get_consumer_group_streams(ConsumerGroup.FILE_PROCESSORS)
    with pytest.raises(UnknownIdentifierError):
        s.group_streams("random-processors")


@pytest.mark.parametrize("text", ["env: dev\n", "service: billing-service\n", ""])
def test_missing_or_unknown_service_raises(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValueError):
        load_settings(_write(tmp_path, text))
