"""Tests for snapshot helpers."""

from types import MappingProxyType

import pytest

from postdeck.snapshot import PostDraft, freeze, thaw


def test_freeze_nested_data():
    post = {"caption": "hi", "media": [{"url": "a.png"}], "tags": {"x"}}
    frozen = freeze(post)

    assert isinstance(frozen, MappingProxyType)
    assert isinstance(frozen["media"], tuple)
    assert isinstance(frozen["media"][0], MappingProxyType)
    assert frozen["tags"] == frozenset({"x"})
    with pytest.raises(TypeError):
        frozen["caption"] = "changed"


def test_freeze_copies_input():
    post = {"caption": "hi", "media": ["a"]}
    frozen = freeze(post)
    post["caption"] = "changed"
    post["media"].append("b")
    assert frozen["caption"] == "hi"
    assert frozen["media"] == ("a",)


def test_frozen_values_compare_equal_to_source():
    post = {"caption": "hi", "count": 3}
    assert freeze(post) == post


def test_thaw_returns_mutable_copy():
    frozen = freeze({"caption": "hi", "media": [{"url": "a.png"}]})
    editable = thaw(frozen)
    editable["media"][0]["url"] = "b.png"
    assert editable == {"caption": "hi", "media": [{"url": "b.png"}]}
    assert frozen["media"][0]["url"] == "a.png"


def test_scalars_pass_through():
    assert freeze("text") == "text"
    assert freeze(None) is None
    assert thaw(5) == 5


def test_post_draft_is_immutable():
    draft = PostDraft(headline="Launch")
    with pytest.raises(AttributeError):
        draft.caption = "x"


def test_post_draft_with_changes():
    draft = PostDraft(headline="Launch")
    updated = draft.with_changes(caption="Out now", hashtags=["new", "launch"])
    assert updated == PostDraft("Launch", "Out now", ("new", "launch"))
    assert draft.caption == ""
    assert hash(updated) == hash(PostDraft("Launch", "Out now", ("new", "launch")))
