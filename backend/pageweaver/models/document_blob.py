# pageweaver/models/document_blob.py
from pageweaver.extensions import db
from .base import BaseModel


class DocumentBlob(BaseModel):
    """
    One entry of the document key-value store.

    ``payload`` holds JSON text exactly as written, so a corrupted value
    is detected when it is decoded on load.
    """
    __tablename__ = "document_blobs"

    key = db.Column(db.String(200), unique=True, nullable=False, index=True)
    payload = db.Column(db.Text, nullable=False)
