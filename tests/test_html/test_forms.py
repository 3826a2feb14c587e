"""Tests for radio/checkbox input groups."""

import pytest
from lxml import html

from bindsheet.errors import InputGroupError
from bindsheet.html.forms import ButtonGroup, InputItem

FORM = """
<form>
  <input type="radio" name="size" value="s" id="size-s" checked>
  <label for="size-s">Small</label>
  <input type="radio" name="size" value="m" id="size-m">
  <label for="size-m">Medium</label>
  <label><input type="checkbox" name="extras" value="cheese"> Cheese</label>
  <input type="checkbox" name="extras" value="ham">
  <input type="text" name="comment">
  <input type="radio" value="orphan">
</form>
"""


@pytest.fixture()
def form() -> html.HtmlElement:
    return html.fragment_fromstring(FORM.strip())


@pytest.fixture()
def groups(form) -> dict[str, ButtonGroup]:
    return {g.name: g for g in ButtonGroup.capture(form)}


class TestCapture:
    def test_groups_by_name_in_order(self, form):
        assert [g.name for g in ButtonGroup.capture(form)] == ["size", "extras"]

    def test_items(self, groups):
        assert [i.value for i in groups["size"].items] == ["s", "m"]
        assert [i.value for i in groups["extras"].items] == ["cheese", "ham"]

    def test_form_reference(self, form, groups):
        assert groups["size"].form is form
        assert groups["size"].items[0].form is form

    def test_multiple_selections(self, groups):
        assert groups["extras"].allow_multiple_selections
        assert not groups["size"].allow_multiple_selections


class TestSelection:
    def test_initial_state(self, groups):
        assert groups["size"].selected_values == ["s"]

    def test_radio_is_exclusive(self, groups):
        small, medium = groups["size"].items
        medium.selected = True
        assert medium.selected
        assert not small.selected
        assert groups["size"].selected_values == ["m"]

    def test_checkboxes_are_independent(self, groups):
        cheese, ham = groups["extras"].items
        cheese.selected = True
        ham.selected = True
        assert groups["extras"].selected_values == ["cheese", "ham"]

    def test_deselect_removes_attribute(self, groups):
        small = groups["size"].items[0]
        small.selected = False
        assert "checked" not in small.element.attrib

    def test_set_value(self, groups):
        item = groups["extras"].items[1]
        item.value = "bacon"
        assert item.element.get("value") == "bacon"


class TestLabels:
    def test_label_for(self, groups):
        assert groups["size"].items[1].text == "Medium"

    def test_enclosing_label(self, groups):
        assert groups["extras"].items[0].text == "Cheese"

    def test_no_label(self, groups):
        assert groups["extras"].items[1].text is None


class TestInvalidItems:
    def test_not_an_input(self, form, groups):
        with pytest.raises(InputGroupError):
            InputItem(groups["size"], form.cssselect("label")[0])

    def test_wrong_type(self, form, groups):
        with pytest.raises(InputGroupError):
            InputItem(groups["size"], form.cssselect("input[type=text]")[0])

    def test_missing_name(self, form, groups):
        with pytest.raises(InputGroupError):
            InputItem(groups["size"], form.cssselect("input[value=orphan]")[0])
