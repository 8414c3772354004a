from repo_exporter.core.menu import choose
from repo_exporter.core.types import Repository


def repos(*names):
    return [Repository(name=n, clone_url=f"https://x/{n}.git") for n in names]


def test_lists_items_one_based(make_reader, capsys):
    assert choose(repos("a", "b", "c"), read_line=make_reader("2")) == 1
    out = capsys.readouterr().out
    assert "1. a\n2. b\n3. c\n" in out


def test_invalid_answers_reprompt(make_reader, capsys):
    reader = make_reader("0", "4", "x", " 3 ")
    assert choose(repos("a", "b", "c"), read_line=reader) == 2
    assert len(reader.prompts) == 4
    out = capsys.readouterr().out
    assert out.count("Enter a number between 1 and 3") == 2
    assert out.count("Please enter a number") == 1


def test_end_of_input_cancels(make_reader):
    assert choose(repos("a", "b", "c"), read_line=make_reader("x")) is None


def test_interrupt_cancels():
    def interrupted(prompt):
        raise KeyboardInterrupt

    assert choose(repos("a"), read_line=interrupted) is None


def test_empty_list_never_prompts(make_reader):
    reader = make_reader("1")
    assert choose([], read_line=reader) is None
    assert reader.prompts == []
