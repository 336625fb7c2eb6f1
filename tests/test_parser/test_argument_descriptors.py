import pytest

from commandkit.output import ConsoleStyle
from commandkit.parser import Argument, Flag, Option


def test_argument_defaults():
    argument = Argument("message")
    assert argument.help == ""
    assert argument.optional is False
    assert argument.required is True
    assert argument.get_usage_text() == "<message>"
    assert argument.style == ConsoleStyle.WARNING


def test_optional_argument():
    assert Argument("place", optional=True).required is False


@pytest.mark.parametrize("descriptor_type", [Option, Flag])
def test_named_usage_text(descriptor_type):
    assert descriptor_type("eyes", short="e").get_usage_text() == "[--eyes,-e]"
    assert descriptor_type("eyes").get_usage_text() == "[--eyes]"
    assert descriptor_type("eyes", short="e").flags == ("--eyes", "-e")
    assert descriptor_type("eyes").flags == ("--eyes",)


def test_styles():
    assert Option("eyes").style == ConsoleStyle.SUCCESS
    assert Flag("dead").style == ConsoleStyle.INFO


def test_descriptors_are_frozen():
    option = Option("eyes", short="e")
    with pytest.raises(AttributeError):
        option.name = "ears"
    assert option == Option("eyes", short="e")
    assert hash(option) == hash(Option("eyes", short="e"))
