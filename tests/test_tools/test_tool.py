import io

import pytest

from gotopts import Command, CommandLineTool, ToolSettings
from gotopts.parser import Argument, Option, OptionType, ValueType


def make_settings(**kwargs) -> ToolSettings:
    settings = ToolSettings(
        "tool",
        "Test tool",
        use_ansi_colors=False,
        out=io.StringIO(),
        err=io.StringIO(),
    )
    for key, value in kwargs.items():
        setattr(settings, key, value)
    return settings


class EchoTool(CommandLineTool):
    def execute(self) -> int:
        for resolved in self.get_inputs(option_predicate=lambda option: option.given):
            self.out.write(f"{resolved.name}={','.join(resolved.values_text())}\n")
        return 0


class BrokenTool(CommandLineTool):
    def execute(self) -> int:
        raise RuntimeError("it broke")


def echo_settings(**kwargs) -> ToolSettings:
    return make_settings(
        options=[
            Option("-s|--single", "Single", OptionType.SINGLE_VALUE),
            Option(
                "-c|--count",
                "Count",
                OptionType.SINGLE_VALUE,
                value_type=ValueType.NUMBER,
            ),
        ],
        arguments=[Argument("path", "Path"), Argument("extra", required=False)],
        **kwargs,
    )


def test_requires_name_and_title():
    with pytest.raises(ValueError):
        CommandLineTool(ToolSettings("", "Title"))
    with pytest.raises(ValueError):
        CommandLineTool(ToolSettings("name", "  "))


def test_execute():
    settings = echo_settings()
    tool = EchoTool(settings)
    assert tool.run(["-s", "x", "here"]) == 0
    assert settings.out.getvalue() == "s=x\npath=here\nextra=\n"
    assert settings.err.getvalue() == ""


def test_inputs_available_after_run():
    tool = EchoTool(echo_settings())
    tool.run(["-c", "3", "here"])
    assert [resolved.name for resolved in tool.options] == ["s", "c"]
    assert [resolved.name for resolved in tool.arguments] == ["path", "extra"]
    assert str(tool.result.get_option("c").value()) == "3"


def test_get_inputs_with_argument_predicate():
    tool = EchoTool(echo_settings())
    tool.run(["here"])
    inputs = tool.get_inputs(
        option_predicate=lambda option: False,
        argument_predicate=lambda argument: argument.given,
    )
    assert [resolved.name for resolved in inputs] == ["path"]


def test_no_arguments_shows_help():
    settings = echo_settings()
    assert EchoTool(settings).run([]) == 1
    assert "Usage: tool [arguments] [options]" in settings.out.getvalue()


def test_no_arguments_without_help():
    settings = echo_settings(show_help_on_no_arguments=False)
    assert EchoTool(settings).run([]) == 1
    assert settings.err.getvalue() == (
        "Missing or invalid argument(s). Use --help for more information.\n"
    )


def test_invalid_option_and_argument():
    settings = echo_settings()
    assert EchoTool(settings).run(["-c", "abc", ""]) == 1
    assert settings.err.getvalue() == (
        "Invalid option(s). Missing or invalid argument(s). "
        "Use --help for more information.\n"
    )
    assert settings.out.getvalue() == ""


def test_invalid_input_without_help_option():
    settings = echo_settings(help_option_template=None)
    assert EchoTool(settings).run(["-c", "abc", "here"]) == 1
    assert settings.err.getvalue() == "Invalid option(s). \n"


def test_usage_error():
    settings = echo_settings()
    assert EchoTool(settings).run(["--nope"]) == 1
    assert settings.err.getvalue() == "Unrecognized option '--nope'\n"


def test_help_exits_zero():
    settings = echo_settings()
    assert EchoTool(settings).run(["--help"]) == 0
    assert "Usage: tool" in settings.out.getvalue()


def test_version_exits_zero():
    settings = echo_settings(version="3.0")
    assert EchoTool(settings).run(["--version"]) == 0
    assert settings.out.getvalue() == "3.0\n"


def test_options_and_arguments_listing():
    settings = echo_settings(options_and_arguments_option=True)
    assert EchoTool(settings).run(["--opts-args", "here"]) == 0
    text = settings.out.getvalue()
    assert text.startswith("Options:\n")
    assert "Arguments:\n" in text
    assert 'path: "here"' in text


def test_listing_still_requires_valid_inputs():
    settings = echo_settings(options_and_arguments_option=True)
    assert EchoTool(settings).run(["--opts-args"]) == 1


def test_unhandled_error_is_reported():
    settings = echo_settings()
    assert BrokenTool(settings).run(["here"]) == 1
    assert settings.err.getvalue() == "RuntimeError: it broke\n"


def test_invalid_declaration_is_reported():
    settings = make_settings(options=[Option("-a", "A"), Option("-a", "Again")])
    assert EchoTool(settings).run(["x"]) == 1
    assert settings.err.getvalue() == "Flag '-a' is already used by another option\n"


class CommandTool(CommandLineTool):
    def __init__(self, settings: ToolSettings) -> None:
        super().__init__(settings)
        self.calls = []

    def add_commands(self) -> None:
        self.add_command(
            Command(
                "greet",
                "Greet someone",
                "Say hello",
                execute=self.greet,
                options=[Option("-l|--loud", "Shout")],
                arguments=[Argument("who", "Who to greet")],
            )
        )
        self.add_command(
            Command(
                "fail",
                "Always fails",
                "Raise an error",
                execute=lambda name, options, arguments: 1 / 0,
            )
        )

    def greet(self, name, options, arguments) -> int:
        self.calls.append(name)
        greeting = f"hello {arguments[0].value()}"
        if options[0].given:
            greeting = greeting.upper()
        self.out.write(greeting + "\n")
        return 0


def test_command_dispatch():
    settings = make_settings()
    tool = CommandTool(settings)
    assert tool.run(["greet", "--loud", "bob"]) == 0
    assert settings.out.getvalue() == "HELLO BOB\n"
    assert tool.calls == ["greet"]


def test_command_invalid_inputs():
    settings = make_settings()
    assert CommandTool(settings).run(["greet"]) == 1
    assert "Missing or invalid argument(s)." in settings.err.getvalue()


def test_command_error_is_reported():
    settings = make_settings()
    assert CommandTool(settings).run(["fail"]) == 1
    assert settings.err.getvalue() == "ZeroDivisionError: division by zero\n"


def test_unknown_command():
    settings = make_settings()
    assert CommandTool(settings).run(["nope"]) == 1
    assert settings.err.getvalue() == "Unrecognized command or argument 'nope'\n"


def test_top_level_help_lists_commands():
    settings = make_settings()
    assert CommandTool(settings).run(["--help"]) == 0
    text = settings.out.getvalue()
    assert "Commands:" in text
    assert "greet  Say hello" in text
    assert "fail   Raise an error" in text


def test_command_help():
    settings = make_settings()
    assert CommandTool(settings).run(["greet", "--help"]) == 0
    text = settings.out.getvalue()
    assert text.startswith("Greet someone\n")
    assert "Usage: tool greet [arguments] [options]" in text


def test_tool_can_run_twice():
    settings = make_settings()
    tool = CommandTool(settings)
    assert tool.run(["greet", "a"]) == 0
    assert tool.run(["greet", "b"]) == 0
    assert settings.out.getvalue() == "hello a\nhello b\n"
