import pytest

from quweid.codemap import CodeMapper
from quweid.paging import LABELS, CandidatePage, Paginator


@pytest.fixture(scope="module")
def mapper():
    return CodeMapper()


def test_labels():
    assert LABELS == ("1", "2", "3", "4", "5", "6", "7", "8", "9", "0")


def test_page_slots(mapper):
    page = CandidatePage.build(160, mapper)
    assert len(page) == 10
    assert [s.sub_code for s in page.slots] == list(range(1601, 1611))
    assert page[0].text == "啊"
    assert page[9].label == "0"
    assert page[9].sub_code == 1610


def test_every_page_has_ten_slots(mapper):
    for code in range(1000):
        page = CandidatePage.build(code, mapper)
        assert len(page) == 10
        assert page[0].sub_code == code * 10 + 1
        assert page[9].sub_code == code * 10 + 10


def test_unmapped_slots_stay_empty():
    page = CandidatePage.build(160, CodeMapper("ascii"))
    assert len(page) == 10
    assert all(slot.is_empty for slot in page.slots)


def test_undecodable_slot_on_real_page(mapper):
    page = CandidatePage.build(169, mapper)
    slot = page[4]
    assert (slot.sub_code, slot.label) == (1695, "5")
    assert slot.is_empty
    assert slot.text == ""


def test_page_code_range(mapper):
    with pytest.raises(ValueError):
        CandidatePage.build(1000, mapper)


def test_prev_at_zero_is_noop(mapper):
    pager = Paginator(mapper, 0)
    assert not pager.has_prev()
    assert not pager.prev()
    assert pager.page_code == 0


def test_next_at_999_is_noop(mapper):
    pager = Paginator(mapper, 999)
    assert not pager.has_next()
    assert not pager.next()
    assert pager.page_code == 999


def test_prev_next(mapper):
    pager = Paginator(mapper, 160)
    assert pager.next()
    assert pager.page_code == 161
    assert pager.page[0].sub_code == 1611
    assert pager.prev()
    assert pager.prev()
    assert pager.page_code == 159


def test_cursor_wraps(mapper):
    pager = Paginator(mapper, 160)
    pager.cursor_prev()
    assert pager.cursor == 9
    pager.cursor_next()
    assert pager.cursor == 0


def test_cursor_survives_page_change(mapper):
    pager = Paginator(mapper, 160)
    pager.cursor_next()
    pager.cursor_next()
    pager.next()
    assert pager.cursor == 2


def test_current_candidate(mapper):
    pager = Paginator(mapper, 160)
    assert pager.current_candidate().text == "啊"
    assert pager.current_candidate(1).text == "阿"
    assert pager.current_candidate(10) is None
