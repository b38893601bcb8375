TILING_FACTOR = 3


def correct_index(slot: int, item_count: int, index_offset: int) -> int:
    """Map a virtual slot of the tiled sequence to a row of the real collection.

    Returns 0 for an empty collection; callers treat that as "no content".
    """
    if item_count <= 0:
        return 0
    return ((slot - index_offset) % item_count + item_count) % item_count


def virtual_slot_count(item_count: int) -> int:
    return TILING_FACTOR * max(0, item_count)
