import assistgen as ag


def test_element_attributes() -> None:
    element = ag.DesignElement("button", data_id=3, data_role="primary")

    assert element.data_id == "3"
    assert element.get_attribute("data-role") == "primary"
    assert element.element_id is None
    assert not element.has_attribute("id")

    element.set_attribute("id", "save")

    assert element.element_id == "save"
    assert element.to_dict() == {
        "tag": "button",
        "attributes": {"data-role": "primary", "data-id": "3", "id": "save"},
    }
