"""Repository query helpers."""

QUERY_BATCH_SIZE = 500


def fetch_all(query, batch_size: int | None = None) -> list:
    """Every item matching ``query``, read ``batch_size`` rows at a time.

    Protean querysets default to a bounded page; this walks the pages until a
    short one comes back.
    """
    batch_size = batch_size or QUERY_BATCH_SIZE
    items = []
    offset = 0
    while True:
        batch = query.offset(offset).limit(batch_size).all().items
        items.extend(batch)
        if len(batch) < batch_size:
            return items
        offset += batch_size
