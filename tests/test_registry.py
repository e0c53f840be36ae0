import pytest

import assistgen as ag


def test_builtin_generator_is_registered() -> None:
    assert "tau" in ag.list_generators()
    assert ag.get_generator("tau") is ag.TAUSnippetGenerator


def test_unknown_generator_raises() -> None:
    with pytest.raises(KeyError):
        ag.create_generator("does-not-exist")


def test_create_generator_passes_options() -> None:
    generator = ag.create_generator("tau", line_ending="\r\n", id_keyword="widget")

    assert isinstance(generator, ag.TAUSnippetGenerator)
    assert generator.line_ending == "\r\n"
    assert generator.id_keyword == "widget"


def test_register_generator_rejects_duplicates_and_empty_keys() -> None:
    class Nameless(ag.SnippetGeneratorBase):
        key = ""

    with pytest.raises(ValueError):
        ag.register_generator(Nameless)
    with pytest.raises(KeyError):
        ag.register_generator(ag.TAUSnippetGenerator)
