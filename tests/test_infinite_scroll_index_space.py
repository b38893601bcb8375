from loopview.widgets.infinite_scroll_index_space import (TILING_FACTOR,
                                                          correct_index,
                                                          virtual_slot_count)


def test_correct_index_returns_zero_for_empty_collection():
    assert correct_index(0, 0, 0) == 0
    assert correct_index(7, 0, -3) == 0
    assert virtual_slot_count(0) == 0


def test_correct_index_stays_in_range_for_negative_slots_and_offsets():
    for item_count in (1, 2, 5, 13):
        for offset in (-40, -7, 0, 3, 29):
            for slot in range(-60, 60):
                assert 0 <= correct_index(slot, item_count, offset) < item_count


def test_correct_index_is_periodic_in_item_count():
    item_count = 7
    for offset in (-9, 0, 4, 15):
        for slot in range(-30, 30):
            assert correct_index(slot, item_count, offset) == correct_index(slot + item_count, item_count, offset)


def test_correct_index_matches_shifted_tiles_after_recenter_scenario():
    # Five items shifted by six cells.
    expected = [((slot - 6) % 5 + 5) % 5 for slot in range(15)]

    assert [correct_index(slot, 5, 6) for slot in range(15)] == expected
    assert expected[:5] == [4, 0, 1, 2, 3]


def test_virtual_slot_count_triples_collection():
    assert TILING_FACTOR == 3
    assert virtual_slot_count(5) == 15
