import pytest

from structkit.brackets import (
    check_brackets,
    check_with_linked_stack,
    is_matching,
    main,
)

CODE1 = "{ int x = (a[5] + b) }"
CODE2 = "{ int y = (c*d)"
CODE3 = "int z = e[2) - {f/(6/4)}"


@pytest.mark.parametrize("pair", ["()", "{}", "[]"])
def test_is_matching_true(pair):
    assert is_matching(pair[0], pair[1]) is True


@pytest.mark.parametrize("pair", ["(]", "{)", "[}", ")("])
def test_is_matching_false(pair):
    assert is_matching(pair[0], pair[1]) is False


@pytest.mark.parametrize("checker", [check_with_linked_stack, check_brackets])
@pytest.mark.parametrize(
    "text, expected",
    [(CODE1, True), (CODE2, False), (CODE3, False), ("", True), (")", False)],
)
def test_checkers(checker, text, expected):
    assert checker(text) is expected


@pytest.mark.parametrize("text", [CODE1, CODE2, CODE3, "([{}])", "(]", "(((", "a)b("])
def test_checkers_agree(text):
    assert check_with_linked_stack(text) == check_brackets(text)


def test_main_reports(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("code1: brackets match") == 2
    assert out.count("code2: bracket error") == 2
    assert out.count("code3: bracket error") == 2
    assert "Stack data = 15\n20\n10\n" in out