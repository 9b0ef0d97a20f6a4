import pytest
from coach.utils import normalize_query, tokenize, require_tokens, label_token_count, sanitize_text
from coach.errors import MalformedQueryError

def test_normalize_query():
    assert normalize_query("Moldy Bread, Stale") == "moldy bread stale"
    assert normalize_query(None) == ""

def test_tokenize_strips_commas_and_whitespace():
    assert tokenize("moldy bread, stale") == ["moldy", "bread", "stale"]
    assert tokenize("  Expiration \t  DATES ") == ["expiration", "dates"]

def test_tokenize_comma_only_word_disappears():
    assert tokenize("eggs , milk") == ["eggs", "milk"]

def test_require_tokens_rejects_empty_query():
    with pytest.raises(MalformedQueryError):
        require_tokens(" , ,  ")
    with pytest.raises(MalformedQueryError):
        require_tokens(None)

def test_label_token_count():
    assert label_token_count("ideas to use up food") == 5
    assert label_token_count("leftovers") == 1

def test_sanitize_text():
    raw = "  Diff   spaces  \n "
    assert sanitize_text(raw) == "Diff spaces"
