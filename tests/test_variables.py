from mkproj.variables import Variables


def test_missing_variable_is_empty():
    variables = Variables()
    assert variables.get("nothing") == ""
    assert "nothing" not in variables


def test_set_then_get():
    variables = Variables()
    variables.set("name", "project")
    assert variables.get("name") == "project"
    assert "name" in variables


def test_overwrite_keeps_single_entry():
    variables = Variables()
    variables.set("name", "first")
    variables.set("name", "second")
    assert variables.get("name") == "second"
    assert len(variables) == 1


def test_length_counts_distinct_keys():
    variables = Variables()
    for key in ("a", "b", "c", "a"):
        variables.set(key, key.upper())
    assert len(variables) == 3
    assert [variables.get(k) for k in ("a", "b", "c")] == ["A", "B", "C"]


def test_empty_value_is_stored():
    variables = Variables()
    variables.set("flag", "")
    assert "flag" in variables
    assert variables.get("flag") == ""


def test_new_table_is_empty():
    assert len(Variables()) == 0