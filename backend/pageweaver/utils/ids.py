import uuid


def new_id(prefix: str) -> str:
    """
    Collision-resistant identifier, e.g. ``section-9f1c...``.

    uuid4 keeps ids distinct when many are generated within the same
    clock tick (bulk duplication, scripted edits).
    """
    return f"{prefix}-{uuid.uuid4().hex}"
