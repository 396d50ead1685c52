"""
Persistence bridge: the page forest and the navigation list are stored as
two independent JSON blobs in the document key-value table.
"""
import json
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from pageweaver.domain.defaults import default_navigation, default_pages
from pageweaver.domain.document import NavigationEntry, Page
from pageweaver.extensions import db
from pageweaver.models.document_blob import DocumentBlob
from pageweaver.normalizers.navigation import navigation_entry_from_dict, normalize_navigation_entry
from pageweaver.normalizers.page import normalize_page, page_from_dict
from pageweaver.utils.audit import log_action
from pageweaver.utils.transaction import transactional
from .exceptions import PersistenceError


@dataclass(frozen=True)
class LoadedDocument:
    pages: Tuple[Page, ...]
    navigation: Tuple[NavigationEntry, ...]
    pages_restored: bool
    navigation_restored: bool


def save_document(
    *,
    pages,
    navigation,
    pages_key: str,
    navigation_key: str,
) -> None:
    """
    Write both blobs.

    Responsibilities:
    - serialize through the normalizers
    - upsert both keys in one transaction
    - audit logging

    Raises PersistenceError when the store is unavailable.
    """
    try:
        pages_payload = json.dumps([normalize_page(p) for p in pages])
        navigation_payload = json.dumps([normalize_navigation_entry(n) for n in navigation])
    except (TypeError, ValueError) as exc:
        raise PersistenceError(f"Document is not serializable: {exc}") from exc

    with transactional():
        _upsert(pages_key, pages_payload)
        _upsert(navigation_key, navigation_payload)

        log_action(
            action="document.save",
            entity_type="document",
            entity_id=pages_key,
            payload={"pages": len(pages), "navigation": len(navigation)},
        )


def load_document(*, pages_key: str, navigation_key: str) -> LoadedDocument:
    """
    Read both blobs independently. A blob that is missing or fails to
    decode falls back to the seed document for that part.
    """
    pages = _read(pages_key, _decode_pages)
    navigation = _read(navigation_key, _decode_navigation)

    return LoadedDocument(
        pages=pages if pages is not None else default_pages(),
        navigation=navigation if navigation is not None else default_navigation(),
        pages_restored=pages is not None,
        navigation_restored=navigation is not None,
    )


def _upsert(key: str, payload: str) -> None:
    blob = DocumentBlob.query.filter_by(key=key).first()

    if not blob:
        blob = DocumentBlob()
        blob.key = key

    blob.payload = payload
    db.session.add(blob)


def _read(key: str, decode: Callable[[list], tuple]) -> Optional[tuple]:
    try:
        blob = DocumentBlob.query.filter_by(key=key).first()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.warning(f"Document store unavailable reading '{key}': {exc}")
        return None

    if not blob:
        return None

    try:
        data = json.loads(blob.payload)
        if not isinstance(data, list):
            raise ValueError(f"expected a list, got {type(data).__name__}")
        return decode(data)
    except (ValueError, KeyError, TypeError, AttributeError) as exc:
        current_app.logger.warning(f"Ignoring unreadable blob '{key}': {exc}")
        return None


def _decode_pages(data: list) -> Tuple[Page, ...]:
    pages = tuple(page_from_dict(item) for item in data)
    if not pages:
        raise ValueError("a document needs at least one page")
    return pages


def _decode_navigation(data: list) -> Tuple[NavigationEntry, ...]:
    return tuple(navigation_entry_from_dict(item) for item in data)
