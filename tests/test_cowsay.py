from commandkit.cowsay import cowsay_command, render_cow
from commandkit.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from commandkit.output import BufferedOutputSink
from commandkit.runner import run_command


def test_render_cow_defaults():
    lines = render_cow("Hello").split("\n")
    assert lines[0] == "  -----"
    assert lines[1] == "< Hello >"
    assert lines[2] == "  -----"
    assert "(oo\\_______" in lines[4]


def test_cowsay_with_options():
    sink = BufferedOutputSink()
    argv = ["cowsay", "I'm a dead cow", "-e", "xx", "-t", "U"]
    assert run_command(cowsay_command, argv, sink) == EXIT_SUCCESS
    assert sink.lines[1] == "< I'm a dead cow >"
    assert "(xx\\_______" in sink.text
    assert "U  ||----w |" in sink.text


def test_cowsay_dead_flag():
    sink = BufferedOutputSink()
    assert run_command(cowsay_command, ["cowsay", "Moo", "--dead"], sink) == EXIT_SUCCESS
    assert "(xx\\_______" in sink.text


def test_cowsay_explicit_eyes_win_over_dead_flag():
    sink = BufferedOutputSink()
    run_command(cowsay_command, ["cowsay", "Moo", "-d", "-e", "^^"], sink)
    assert "(^^\\_______" in sink.text


def test_cowsay_missing_message():
    sink = BufferedOutputSink()
    assert run_command(cowsay_command, ["cowsay", "-e", "xx"], sink) == EXIT_INVALID_USAGE
    assert sink.lines[0] == "Error: Missing required argument 'message'"


def test_cowsay_help():
    sink = BufferedOutputSink()
    assert run_command(cowsay_command, ["cowsay", "--help"], sink) == EXIT_SUCCESS
    assert sink.lines[0] == "Usage: cowsay <message> [--eyes,-e] [--tongue,-t] [--dead,-d] "
    assert "Generates ASCII picture of a cow with a message." in sink.lines
