"""Menu board HTTP API tests."""

from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from menuboard.core.catalog import ConfigurationError
from menuboard.core.config import settings
from menuboard.db import session as db_session
from menuboard.db.base import Base
from menuboard.main import app

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def _use_bundled_sheet(tmp_path: Path, monkeypatch) -> None:
    engine = _build_test_engine(tmp_path / "test_menu_api.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    monkeypatch.setattr(settings, "menu_config_path", str(CONFIG_DIR / "config.json"))
    monkeypatch.setattr(settings, "menu_fallback_csv_path", str(CONFIG_DIR / "fallback_data.csv"))
    monkeypatch.setattr(settings, "menu_source_url", "")


def test_kitchen_menu_in_english(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)

    with TestClient(app) as client:
        response = client.get("/api/v1/menu/kitchen", params={"lang": "en"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["section"] == "kitchen"
    assert payload["language"] == "en"
    assert payload["last_sheet_update"] == "12/10/2026 09:30"
    assert [category["label"] for category in payload["categories"]] == ["Starters", "First courses", "dolci"]
    spaghetti = payload["categories"][1]["items"][0]
    assert spaghetti["name"] == "Spaghetti with clams"
    assert spaghetti["price"] == "€ 14,00"
    assert spaghetti["allergens"] == [1]


def test_vegetarian_filter(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)

    with TestClient(app) as client:
        response = client.get("/api/v1/menu/kitchen", params={"diet": "vegetarian", "lang": "it"})

    assert response.status_code == 200
    names = [item["name"] for category in response.json()["categories"] for item in category["items"]]
    assert names == ["Risotto ai funghi", "Tiramisù"]


def test_allergen_exclusion_filter(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)

    with TestClient(app) as client:
        response = client.get("/api/v1/menu/kitchen", params=[("exclude", "milk"), ("lang", "it")])

    assert response.status_code == 200
    categories = response.json()["categories"]
    assert [category["id"] for category in categories] == ["primi"]
    assert [item["name"] for item in categories[0]["items"]] == ["Spaghetti alle vongole"]


def test_unknown_section_and_invalid_diet(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)

    with TestClient(app) as client:
        missing = client.get("/api/v1/menu/terrace")
        invalid = client.get("/api/v1/menu/bar", params={"diet": "keto"})

    assert missing.status_code == 404
    assert invalid.status_code == 422


def test_timeslots_listing(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)

    with TestClient(app) as client:
        response = client.get("/api/v1/timeslots")

    assert response.status_code == 200
    payload = response.json()
    assert len(payload["time_slots"]) == 3
    info = payload["time_slots_for_info"]
    assert [slot["id"] for slot in info] == ["pranzo", "aperitivo"]
    assert info[0]["collapsed_schedule"][0]["days"]["en"] == "Monday – Wednesday"


def test_slot_status_uses_current_time(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)
    monkeypatch.setattr(
        "menuboard.api.v1.endpoints.timeslots.current_local_datetime",
        lambda: datetime(2026, 10, 17, 19, 0),
    )

    with TestClient(app) as client:
        response = client.get("/api/v1/timeslots/status")

    assert response.status_code == 200
    payload = response.json()
    assert payload["show_next_label"] is False
    assert [(slot["slot_id"], slot["status"], slot["minutes_until"]) for slot in payload["slots"]] == [
        ("aperitivo", "active", 0),
        ("notte", "upcoming", 180),
    ]


def test_slot_status_before_opening_shows_next_label(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)
    monkeypatch.setattr(
        "menuboard.api.v1.endpoints.timeslots.current_local_datetime",
        lambda: datetime(2026, 10, 12, 11, 30),
    )

    with TestClient(app) as client:
        payload = client.get("/api/v1/timeslots/status").json()

    assert payload["show_next_label"] is True
    assert payload["slots"][0]["slot_id"] == "pranzo"
    assert payload["slots"][0]["minutes_until"] == 30


def test_content_endpoint(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)

    with TestClient(app) as client:
        response = client.get("/api/v1/content")

    assert response.status_code == 200
    assert response.json()["menu_header_kitchen"]["titles"]["it"] == "La nostra cucina"


def test_refresh_reports_fallback_origin(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)

    with TestClient(app) as client:
        before = client.get("/health").json()
        response = client.post("/api/v1/board/refresh")
        after = client.get("/health").json()

    assert response.status_code == 200
    assert response.json()["origin"] == "fallback_file"
    assert response.json()["using_fallback"] is True
    assert before["board_loaded"] is False
    assert after["board_loaded"] is True


def test_missing_sheet_returns_service_unavailable(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)
    monkeypatch.setattr(settings, "menu_fallback_csv_path", str(tmp_path / "missing.csv"))

    with TestClient(app) as client:
        menu_response = client.get("/api/v1/menu/bar")
        refresh_response = client.post("/api/v1/board/refresh")

    assert menu_response.status_code == 503
    assert refresh_response.status_code == 503


def test_startup_fails_without_configuration(tmp_path: Path, monkeypatch) -> None:
    _use_bundled_sheet(tmp_path, monkeypatch)
    monkeypatch.setattr(settings, "menu_config_path", str(tmp_path / "missing.json"))

    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass
