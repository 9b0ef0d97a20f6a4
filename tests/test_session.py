import pytest
from coach.loader import KnowledgeEntry
from coach.session import (
    SessionState, FollowUp, WRONG_INVOCATION, present_first_page, present_follow_up
)

@pytest.fixture
def results():
    return [
        KnowledgeEntry("expiration dates", "textA"),
        KnowledgeEntry("expired eggs", "textB"),
        KnowledgeEntry("expired milk", "textC"),
    ]

def test_first_page_parks_next_entry(results):
    session = SessionState()
    page = present_first_page("expir", results, session)
    assert page.primary == results[0]
    assert page.overflow_announced is True
    assert session.pending_entries == [results[1]]
    assert session.pending_count == 3
    assert session.pending_label == "expir"

def test_single_result_leaves_session_alone(results):
    session = SessionState()
    page = present_first_page("expiration dates", results[:1], session)
    assert page.primary == results[0]
    assert page.overflow_announced is False
    assert session == SessionState()

def test_no_match_does_not_touch_pending_state(results):
    session = SessionState()
    present_first_page("expir", results, session)
    page = present_first_page("zucchini", [], session)
    assert not page.found
    assert session.pending_label == "expir"
    assert session.pending_entries == [results[1]]

def test_new_query_overwrites_pending_state(results):
    session = SessionState()
    present_first_page("expir", results, session)
    present_first_page("expired", results[1:], session)
    assert session.pending_label == "expired"
    assert session.pending_count == 2
    assert session.pending_entries == [results[2]]

def test_follow_up_without_pending_state():
    assert present_follow_up(SessionState()) is WRONG_INVOCATION
    assert not WRONG_INVOCATION

def test_follow_up_returns_parked_page_once(results):
    session = SessionState()
    present_first_page("expir", results, session)
    follow_up = present_follow_up(session)
    assert follow_up == FollowUp(entries=[results[1]], label="expir", count=3)
    assert present_follow_up(session) is WRONG_INVOCATION

def test_follow_up_can_keep_the_page(results):
    session = SessionState()
    present_first_page("expir", results, session)
    first = present_follow_up(session, consume=False)
    second = present_follow_up(session, consume=False)
    assert first == second
    assert session.has_pending

def test_attribute_bag_uses_transport_keys(results):
    session = SessionState()
    present_first_page("expir", results, session)
    attrs = session.to_attributes()
    assert attrs == {
        "resultLength": 3,
        "Problem": "expir",
        "results": [["expired eggs", "textB"]],
    }
    assert SessionState.from_attributes(attrs) == session

def test_attribute_bag_accepts_issue_alias():
    state = SessionState.from_attributes({"Issue": "eggs", "resultLength": 2, "results": [["expired eggs", "b"]]})
    assert state.pending_label == "eggs"
    assert state.pending_entries == [KnowledgeEntry("expired eggs", "b")]

def test_empty_attribute_bag():
    assert SessionState.from_attributes(None) == SessionState()
    assert SessionState.from_attributes({"Problem": "eggs"}) == SessionState()
    assert SessionState().to_attributes() == {}
