import pickle

import pytest
from stringdict.core.keys import KEY_PREFIX, MISSING, make_key, revoke_key


def test_make_key_prefixes():
    assert make_key("a") == KEY_PREFIX + "a"
    assert make_key(1) == KEY_PREFIX + "1"


def test_make_key_is_deterministic():
    assert make_key("constructor") == make_key("constructor")
    assert make_key("a") != make_key("b")


def test_revoke_key_inverts_make_key():
    for key in ["a", "__class__", "items", "with space", "1"]:
        assert revoke_key(make_key(key)) == key


def test_revoke_key_strips_only_one_prefix():
    nested = KEY_PREFIX + "x"
    assert revoke_key(make_key(nested)) == nested


def test_revoke_key_rejects_unprefixed():
    with pytest.raises(ValueError, match="not a storage key"):
        revoke_key("plain")


def test_missing_sentinel():
    assert not MISSING
    assert MISSING is not None
    assert repr(MISSING) == "MISSING"
    assert type(MISSING)() is MISSING
    assert pickle.loads(pickle.dumps(MISSING)) is MISSING
