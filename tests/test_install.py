import pytest

from sorton import DESCENDING, RETURNINDEXEDARRAY, SortOnList, install, uninstall


@pytest.fixture
def installed():
    install()
    yield SortOnList
    uninstall()


def test_nothing_is_installed_on_import():
    assert not hasattr(SortOnList, "sort_on")
    assert not hasattr(SortOnList, "NUMERIC")


def test_install_adds_constants_and_method(installed):
    assert installed.CASEINSENSITIVE == 1
    assert installed.DESCENDING == 2
    assert installed.UNIQUESORT == 4
    assert installed.RETURNINDEXEDARRAY == 8
    assert installed.NUMERIC == 16

    rows = installed([{"a": 1}, {"a": 3}, {"a": 2}])
    assert rows.sort_on("a", installed.DESCENDING) is None
    assert [row["a"] for row in rows] == [3, 2, 1]


def test_installed_method_returns_sorted_copy(installed):
    rows = installed([{"a": "b"}, {"a": "a"}])
    result = rows.sort_on("a", RETURNINDEXEDARRAY)
    assert [row["a"] for row in result] == ["a", "b"]
    assert [row["a"] for row in rows] == ["b", "a"]


def test_install_on_custom_subclass():
    class Rows(list):
        pass

    assert install(Rows) is Rows
    rows = Rows([{"n": "10"}, {"n": "9"}])
    rows.sort_on("n", Rows.NUMERIC | DESCENDING)
    assert [row["n"] for row in rows] == ["10", "9"]

    uninstall(Rows)
    assert not hasattr(Rows, "sort_on")
    assert not hasattr(Rows, "NUMERIC")


def test_install_on_builtin_list_is_rejected():
    with pytest.raises(TypeError):
        install(list)
