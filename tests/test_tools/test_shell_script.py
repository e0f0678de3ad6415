import io

from gotopts import ShellScriptCli, ToolSettings
from gotopts.parser import Argument, Option, OptionType, ValueType


def make_script(options=None, arguments=None) -> ShellScriptCli:
    settings = ToolSettings(
        "foo",
        "Does all sorts of Foo'ing Things",
        options=options or [],
        arguments=arguments or [],
        use_ansi_colors=False,
        out=io.StringIO(),
        err=io.StringIO(),
    )
    return ShellScriptCli(settings)


def standard_script() -> ShellScriptCli:
    return make_script(
        options=[
            Option("-m|--multiple", "Multiple-value option", OptionType.MULTIPLE_VALUE),
            Option("-n|--no", "No-value option"),
            Option("-s|--single", "Single-value option", OptionType.SINGLE_VALUE),
        ],
        arguments=[
            Argument("arg1", "Argument 1"),
            Argument("arg2", "Argument 2", can_be_empty=True),
            Argument("arg3", "Argument 3", required=False, default_value="three"),
        ],
    )


def test_outputs_given_options_and_all_arguments():
    script = standard_script()
    assert script.run(["-m", "xyz", "-m", "abc", "foo bar", "2"]) == 0
    assert script.out.getvalue() == (
        '[opt_m="xyz,abc"\narg_arg1="foo bar"\narg_arg2="2"\narg_arg3="three"\n]'
    )
    assert script.err.getvalue() == ""


def test_no_value_option_outputs_on():
    script = standard_script()
    assert script.run(["--no", "a", ""]) == 0
    assert script.out.getvalue() == (
        '[opt_n="on"\narg_arg1="a"\narg_arg2=""\narg_arg3="three"\n]'
    )


def test_numbers_are_output_as_given():
    script = make_script(
        options=[
            Option(
                "-c|--count",
                "Count",
                OptionType.SINGLE_VALUE,
                value_type=ValueType.NUMBER,
            )
        ],
        arguments=[Argument("size", value_type=ValueType.NUMBER)],
    )
    assert script.run(["--count", "3", "0.0000001"]) == 0
    assert script.out.getvalue() == '[opt_c="3"\narg_size="0.0000001"\n]'


def test_invalid_number_is_rejected():
    script = make_script(arguments=[Argument("size", value_type=ValueType.NUMBER)])
    assert script.run(["big"]) == 1
    assert script.out.getvalue() == ""
    assert "Missing or invalid argument(s)." in script.err.getvalue()


def test_fail_check():
    script = make_script(arguments=[Argument("arg1", "Argument 1", user_data="fail")])
    assert script.run(["anything"]) == 1
    assert script.out.getvalue() == ""
    assert script.err.getvalue() == "foo: argument arg1: FAIL.\n"


def test_every_failing_check_is_reported():
    script = make_script(
        options=[
            Option("-s", "Single", OptionType.SINGLE_VALUE, user_data="fail"),
        ],
        arguments=[
            Argument("arg1", user_data="fail"),
            Argument("arg2", user_data="fail"),
        ],
    )
    assert script.run(["-s", "x", "a", "b"]) == 1
    assert script.err.getvalue() == (
        "foo: option s: FAIL.\n"
        "foo: argument arg1: FAIL.\n"
        "foo: argument arg2: FAIL.\n"
    )


def test_check_skipped_without_value():
    script = make_script(
        options=[Option("-s", "Single", OptionType.SINGLE_VALUE, user_data="fail")],
        arguments=[Argument("arg1", required=False, user_data="fail")],
    )
    assert script.run(["-s", "x"]) == 1
    assert script.err.getvalue() == "foo: option s: FAIL.\n"


def test_unknown_check_tag_passes():
    script = make_script(arguments=[Argument("arg1", user_data="zzz")])
    assert script.run(["x"]) == 0
    assert script.out.getvalue() == '[arg_arg1="x"\n]'


def test_directory_checks(tmp_path):
    existing = tmp_path / "there"
    existing.mkdir()
    missing = tmp_path / "missing"

    script = make_script(
        arguments=[
            Argument("source", user_data="d"),
            Argument("target", user_data="!d"),
        ]
    )
    assert script.run([str(existing), str(missing)]) == 0

    script = make_script(arguments=[Argument("source", user_data="d")])
    assert script.run([str(missing)]) == 1
    assert script.err.getvalue() == (
        f"foo: argument source: directory '{missing}' does not exist\n"
    )

    script = make_script(arguments=[Argument("target", user_data="!d")])
    assert script.run([str(existing)]) == 1
    assert script.err.getvalue() == (
        f"foo: argument target: directory '{existing}' already exists\n"
    )


def test_file_checks(tmp_path):
    existing = tmp_path / "file.txt"
    existing.write_text("data")
    missing = tmp_path / "nope.txt"

    script = make_script(
        arguments=[
            Argument("source", user_data="f"),
            Argument("target", user_data="!f"),
        ]
    )
    assert script.run([str(existing), str(missing)]) == 0

    script = make_script(arguments=[Argument("source", user_data="f")])
    assert script.run([str(tmp_path)]) == 1
    assert "does not exist" in script.err.getvalue()

    script = make_script(arguments=[Argument("target", user_data="!f")])
    assert script.run([str(existing)]) == 1
    assert "already exists" in script.err.getvalue()


def test_option_checks_only_when_given(tmp_path):
    script = make_script(
        options=[
            Option(
                "-c|--config",
                "Config file",
                OptionType.SINGLE_VALUE,
                user_data="f",
            )
        ]
    )
    script.settings.show_help_on_no_arguments = False
    assert script.run([]) == 0
    assert script.out.getvalue() == "[]"


def test_help_is_plain_text():
    script = standard_script()
    assert script.run(["--help"]) == 0
    text = script.out.getvalue()
    assert not text.startswith("[")
    assert "Usage: foo [arguments] [options]" in text
