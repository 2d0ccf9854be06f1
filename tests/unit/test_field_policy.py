"""Unit tests for FieldPolicy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.Models import FieldPolicy, Model


class Article(Model):
    __fillable__ = ['title', 'body']
    __guarded__ = ['id']
    __hidden__ = ['draft_notes']
    __casts__ = {'published': 'boolean'}


class TestFieldPolicy:
    """Test suite for FieldPolicy."""

    def test_from_model_class_copies_declaration(self) -> None:
        """Test copying the class-level policy."""
        policy = FieldPolicy.from_model_class(Article)
        assert policy.fillable == ['title', 'body']
        assert policy.guarded == ['id']
        assert policy.hidden == ['draft_notes']
        assert policy.visible == []
        assert policy.appends == []
        assert policy.casts == {'published': 'boolean'}

    def test_changes_do_not_leak_into_class(self) -> None:
        """Test that instance policies are independent copies."""
        policy = FieldPolicy.from_model_class(Article)
        policy.fillable.append('slug')
        policy.casts['views'] = 'int'
        assert Article.__fillable__ == ['title', 'body']
        assert Article.__casts__ == {'published': 'boolean'}

    def test_single_name_is_promoted(self) -> None:
        """Test that a bare string becomes a one element list."""
        policy = FieldPolicy(guarded='*')
        assert policy.guarded == ['*']
        policy.hidden = 'secret'
        assert policy.hidden == ['secret']

    def test_none_becomes_empty(self) -> None:
        """Test that None clears a facet."""
        policy = FieldPolicy(visible=['name'])
        policy.visible = None
        assert policy.visible == []

    def test_assignment_is_validated(self) -> None:
        """Test that invalid names are rejected."""
        policy = FieldPolicy()
        with pytest.raises(ValidationError):
            policy.fillable = [1, 2]
        with pytest.raises(ValidationError):
            policy.casts = {'age': 5}

    def test_unknown_facets_are_rejected(self) -> None:
        """Test that only known facets are accepted."""
        with pytest.raises(ValidationError):
            FieldPolicy(fillables=['name'])

    @pytest.mark.parametrize("fillable,guarded,expected", [
        ([], ['*'], True),
        (['name'], ['*'], False),
        ([], [], False),
        ([], ['*', 'id'], False),
    ])
    def test_is_totally_guarded(self, fillable: list[str], guarded: list[str], expected: bool) -> None:
        """Test the totally guarded rule."""
        assert FieldPolicy(fillable=fillable, guarded=guarded).is_totally_guarded() is expected
