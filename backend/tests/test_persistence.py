from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from pageweaver.application.editor.autosave import autosave
from pageweaver.application.editor.exceptions import PersistenceError
from pageweaver.application.editor.persistence import load_document, save_document
from pageweaver.application.editor.session import EditorSession
from pageweaver.domain.defaults import default_navigation, default_pages
from pageweaver.engine.pages import publish_page
from pageweaver.extensions import db
from pageweaver.models.document_blob import DocumentBlob

KEYS = {"pages_key": "test.pages", "navigation_key": "test.navigation"}


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


def _store(key, payload):
    blob = DocumentBlob()
    blob.key = key
    blob.payload = payload
    db.session.add(blob)
    db.session.commit()


def test_round_trip(ctx, pages, navigation):
    stamped = publish_page(pages, "about", datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc))

    save_document(pages=stamped, navigation=navigation, **KEYS)
    loaded = load_document(**KEYS)

    assert loaded.pages_restored and loaded.navigation_restored
    assert loaded.pages == stamped
    assert loaded.navigation == navigation


def test_save_overwrites_previous_blob(ctx, pages, navigation):
    save_document(pages=pages, navigation=navigation, **KEYS)
    save_document(pages=pages[:1], navigation=navigation[:1], **KEYS)

    loaded = load_document(**KEYS)
    assert [p.id for p in loaded.pages] == ["home"]
    assert DocumentBlob.query.count() == 2


def test_missing_blobs_fall_back_to_seed(ctx):
    loaded = load_document(**KEYS)

    assert not loaded.pages_restored
    assert not loaded.navigation_restored
    assert loaded.pages == default_pages()
    assert loaded.navigation == default_navigation()


@pytest.mark.parametrize("payload", ["{not json", '{"pages": []}', '[{"title": "no id"}]'])
def test_corrupt_pages_blob_does_not_discard_navigation(ctx, pages, navigation, payload):
    save_document(pages=pages, navigation=navigation, **KEYS)

    blob = DocumentBlob.query.filter_by(key="test.pages").first()
    blob.payload = payload
    db.session.commit()

    loaded = load_document(**KEYS)

    assert not loaded.pages_restored
    assert loaded.pages == default_pages()
    assert loaded.navigation_restored
    assert loaded.navigation == navigation


def test_empty_page_list_is_not_restored(ctx):
    _store("test.pages", "[]")
    assert not load_document(**KEYS).pages_restored


def test_unavailable_store_falls_back(ctx):
    db.drop_all()

    loaded = load_document(**KEYS)
    assert not loaded.pages_restored
    assert not loaded.navigation_restored


def test_save_failure_raises_persistence_error(ctx, pages, navigation):
    db.drop_all()

    with pytest.raises(PersistenceError):
        save_document(pages=pages, navigation=navigation, **KEYS)


def test_autosave_reports_success(ctx, pages, navigation):
    session = EditorSession.start(pages, navigation, "admin")

    assert autosave(session, **KEYS) is True
    assert load_document(**KEYS).pages == pages


def test_autosave_failure_keeps_editing(ctx, pages, navigation):
    session = EditorSession.start(pages, navigation, "admin")

    with patch(
        "pageweaver.application.editor.autosave.save_document",
        side_effect=PersistenceError("disk full"),
    ):
        assert autosave(session, **KEYS) is False

    assert session.state.pages == pages
