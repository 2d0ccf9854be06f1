"""Unit tests for array and JSON export."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import pytest

from app.Attributes import Attribute, accessor
from app.Models import MissingAccessorException, Model


class User(Model):
    __hidden__ = ['password']
    __appends__ = ['fullName']
    __casts__ = {'is_admin': 'boolean', 'settings': 'object'}

    @accessor('full_name')
    def get_full_name_attribute(self, value: Any) -> Optional[str]:
        if self.first_name is None:
            return None
        return f"{self.first_name} {self.last_name}"


class KeepsNulls(Model):
    __filter_null_values__ = False


class CamelModel(Model):
    __snake_attributes__ = False


class StudlyModel(Model):
    __snake_attributes__ = False
    __lc_first__ = False


class Money:
    def __init__(self, cents: int) -> None:
        self.cents = cents

    def to_array(self) -> Dict[str, Any]:
        return {'amount': self.cents / 100, 'currency': 'USD'}


class Invoice(Model):
    __casts__ = {'total': 'int', 'lines': 'array'}

    total = Attribute.make(get=lambda value: Money(int(value)))


class TestVisibility:
    """Test suite for hidden and visible attributes."""

    def test_hidden_attributes_are_omitted(self) -> None:
        """Test that hidden attributes never reach the export."""
        data = User({'first_name': 'Ada', 'last_name': 'Lovelace', 'password': 'secret'}).to_array()
        assert 'password' not in data
        assert data['first_name'] == 'Ada'

    def test_visible_wins_over_hidden(self) -> None:
        """Test that a visible list replaces the hidden list."""
        model = Model({'name': 'Ada', 'email': 'ada@example.com'})
        model.set_hidden(['name']).set_visible(['name'])
        assert model.to_array() == {'name': 'Ada'}

    def test_visible_limits_export(self) -> None:
        """Test that only visible attributes are exported."""
        model = Model({'name': 'Ada', 'email': 'ada@example.com'}).set_visible(['email'])
        assert model.to_array() == {'email': 'ada@example.com'}

    def test_hidden_appends_are_omitted(self) -> None:
        """Test that appended attributes follow hidden as well."""
        model = User({'first_name': 'Ada', 'last_name': 'Lovelace'}).add_hidden('fullName')
        assert 'full_name' not in model.to_array()


class TestNullFilter:
    """Test suite for null filtering."""

    def test_nulls_are_dropped(self) -> None:
        """Test the default null filter."""
        assert Model({'a': None, 'b': 1}).to_array() == {'b': 1}

    def test_nulls_are_kept_when_disabled(self) -> None:
        """Test disabling the null filter per class."""
        assert KeepsNulls({'a': None, 'b': 1}).to_array() == {'a': None, 'b': 1}

    def test_null_appended_values_are_dropped(self) -> None:
        """Test that the filter applies to appended values too."""
        assert User({'email': 'ada@example.com'}).to_array() == {'email': 'ada@example.com'}


class TestKeyCase:
    """Test suite for export key conversion."""

    def test_snake_case_export(self) -> None:
        """Test the default snake case keys."""
        assert Model({'firstName': 'Ada'}).to_array() == {'first_name': 'Ada'}

    def test_camel_case_export(self) -> None:
        """Test camel case keys."""
        assert CamelModel({'first_name': 'Ada'}).to_array() == {'firstName': 'Ada'}

    def test_studly_case_export(self) -> None:
        """Test studly case keys."""
        assert StudlyModel({'first_name': 'Ada'}).to_array() == {'FirstName': 'Ada'}

    def test_case_format(self) -> None:
        """Test the key formatter directly."""
        assert Model.case_format('fullName') == 'full_name'
        assert CamelModel.case_format('full_name') == 'fullName'


class TestExportValues:
    """Test suite for accessor, cast and appended values in exports."""

    def test_appended_accessor_is_exported(self) -> None:
        """Test that an appended attribute is computed and snake cased."""
        data = User({'first_name': 'Ada', 'last_name': 'Lovelace'}).to_array()
        assert data['full_name'] == 'Ada Lovelace'
        assert 'fullName' not in data

    def test_casts_apply_to_export(self) -> None:
        """Test that casts shape exported values."""
        data = User({'is_admin': '0', 'settings': {'theme': 'dark'}}).to_array()
        assert data['is_admin'] is False
        assert data['settings'].theme == 'dark'

    def test_accessor_skips_cast_in_export(self) -> None:
        """Test that accessor values are not cast again."""
        data = Invoice({'total': '1250', 'lines': [1, 2]}).to_array()
        assert data == {'total': {'amount': 12.5, 'currency': 'USD'}, 'lines': [1, 2]}

    def test_missing_appended_accessor_raises(self) -> None:
        """Test that appending an attribute without accessor fails."""
        model = Model({'a': 1}).set_appends(['ghost'])
        with pytest.raises(MissingAccessorException):
            model.to_array()

    def test_export_does_not_change_the_store(self) -> None:
        """Test that exporting leaves attributes untouched."""
        model = Invoice({'total': '1250'})
        model.to_array()
        assert model.get_attributes() == {'total': '1250'}


class TestJson:
    """Test suite for JSON export."""

    def test_to_json_matches_to_array(self) -> None:
        """Test that JSON holds the array form."""
        model = User({'first_name': 'Ada', 'last_name': 'Lovelace', 'password': 'x'})
        assert json.loads(model.to_json()) == {
            'first_name': 'Ada',
            'last_name': 'Lovelace',
            'full_name': 'Ada Lovelace',
        }

    def test_to_json_serializes_objects(self) -> None:
        """Test JSON export of object casts and arrayable values."""
        assert json.loads(User({'settings': {'theme': 'dark'}}).to_json()) == {'settings': {'theme': 'dark'}}
        assert json.loads(Invoice({'total': 100}).to_json()) == {'total': {'amount': 1.0, 'currency': 'USD'}}

    def test_to_json_options(self) -> None:
        """Test that options are passed to json.dumps."""
        assert Model({'b': 1, 'a': 2}).to_json(sort_keys=True) == '{"a": 2, "b": 1}'

    def test_str_is_json(self) -> None:
        """Test the string form of a model."""
        model = Model({'a': 1})
        assert str(model) == model.to_json() == '{"a": 1}'
