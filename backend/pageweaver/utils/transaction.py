from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from pageweaver.application.editor.exceptions import PersistenceError
from pageweaver.extensions import db


@contextmanager
def transactional():
    """
    Commit on success, roll back on any error. Storage errors surface as
    PersistenceError.
    """
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise PersistenceError(str(exc)) from exc
    except Exception:
        db.session.rollback()
        raise
