import pytest

import assistgen as ag


def test_coerce_accepts_wizard_keys() -> None:
    intent = ag.Intent.coerce(
        {
            "name": "btn",
            "useExist": True,
            "type": "click",
            "widgetInfo": {"constructorName": "tau.widget.Button", "name": "b", "options": [["a", 1]]},
            "unknown": "ignored",
        }
    )

    assert intent.name == "btn"
    assert intent.use_exist is True
    assert intent.type == "click"
    assert intent.widget_info.constructor_name == "tau.widget.Button"
    assert intent.widget_info.options == [("a", 1)]


def test_coerce_accepts_snake_case_and_none() -> None:
    intent = ag.Intent.coerce({"use_exist": 1, "widget_info": {"constructor_name": "C", "name": "c"}})

    assert intent.use_exist is True
    assert intent.widget_info.constructor_name == "C"
    assert ag.Intent.coerce(None).name is None


def test_coerce_rejects_other_types() -> None:
    with pytest.raises(ag.IntentError):
        ag.Intent.coerce("click")
    with pytest.raises(ag.IntentError):
        ag.Intent(widget_info="tau.widget.Button")


def test_widget_options_must_be_pairs() -> None:
    with pytest.raises(ag.IntentError):
        ag.WidgetInfo(constructor_name="C", name="c", options=["broken"])


def test_mapping_options_keep_order() -> None:
    info = ag.WidgetInfo(constructor_name="C", name="c", options={"z": 1, "a": 2})

    assert info.options == [("z", 1), ("a", 2)]


def test_replace_returns_copy() -> None:
    intent = ag.Intent(name="a", type="click")

    changed = intent.replace(content="go();")

    assert changed.content == "go();"
    assert changed.name == "a"
    assert intent.content is None


def test_to_dict_uses_wizard_keys() -> None:
    intent = ag.Intent(name="a", widget_info={"constructorName": "C", "name": "c"})

    payload = intent.to_dict()

    assert payload["useExist"] is False
    assert payload["widgetInfo"] == {"constructorName": "C", "name": "c", "options": []}
