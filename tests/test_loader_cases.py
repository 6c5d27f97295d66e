from pathlib import Path

import pytest

from loader import LoadError, load_file, load_json
from printer import print_node
from syntax import Command, File, Lit, ParamExp, Quoted, Redir, Stmt, Token, Word

CASES_DIR = Path(__file__).parent / "cases"


TEST_CASES = [
    ("hello.json", "echo hi"),
    (
        "control_flow.json",
        'for f in *.txt; do if test -s "$f"; then echo "$f" >>nonempty.log; fi\ndone\necho done',
    ),
    (
        "function_decl.json",
        'function greet() { local name=$1; echo "hello $name"; }\ngreet world',
    ),
    ("process_input.json", "diff a < <(sort b) 2>&1"),
]


@pytest.mark.parametrize("name, expected", TEST_CASES)
def test_cases_print(name: str, expected: str):
    result = load_file(CASES_DIR / name)
    assert result.source_name.endswith(name)
    assert print_node(result.ast) == expected


def test_loaded_tree_matches_constructed_tree():
    result = load_file(CASES_DIR / "hello.json")
    expected = File(
        stmts=[Stmt(node=Command(args=[Word(parts=[Lit("echo")]), Word(parts=[Lit("hi")])]))]
    )
    assert result.ast == expected


def test_tokens_and_defaults():
    source = """
    {
      "Type": "Stmt",
      "Node": {"Type": "Command", "Args": [{"Parts": [
        {"Type": "Quoted", "Quote": "$'", "Parts": [{"Type": "Lit", "Value": "x"}]}
      ]}]},
      "Redirs": [{"Op": ">>", "Word": {"Parts": [{"Type": "Lit", "Value": "f"}]}}]
    }
    """
    stmt = load_json(source).ast
    assert stmt.negated is False
    assert stmt.assigns == []
    assert stmt.node.args[0].parts[0] == Quoted(quote=Token.DOLLSQ, parts=[Lit("x")])
    assert stmt.redirs == [Redir(op=Token.APPEND, word=Word(parts=[Lit("f")]))]
    assert print_node(stmt) == "$'x' >>f"


def test_with_key_maps_to_replacement():
    source = """
    {"Type": "ParamExp", "Param": {"Value": "p"},
     "Repl": {"All": true, "Orig": {"Parts": [{"Type": "Lit", "Value": "a"}]},
              "With": {"Parts": [{"Type": "Lit", "Value": "b"}]}}}
    """
    node = load_json(source).ast
    assert isinstance(node, ParamExp)
    assert print_node(node) == "${p//a/b}"


@pytest.mark.parametrize(
    "source, message, path",
    [
        ("{not json", "Invalid JSON", None),
        ("[]", "Expected an object", "$"),
        ('{"Type": "Nope"}', "Unknown node Type", "$"),
        ('{"Type": "Elif"}', "Unknown node Type 'Elif'", "$"),
        ('{"Type": "PatternList"}', "Unknown node Type 'PatternList'", "$"),
        ('{"Type": "Lit"}', "missing required field 'Value'", "$"),
        ('{"Type": "Lit", "Value": 3}', "Expected a string", "$.Value"),
        ('{"Type": "Stmt", "Negated": "yes"}', "Expected a boolean", "$.Negated"),
        ('{"Type": "Command", "Args": {}}', "Expected a list", "$.Args"),
        (
            '{"Type": "Word", "Parts": [{"Type": "Command"}]}',
            "Expected one of",
            "$.Parts[0]",
        ),
        (
            '{"Type": "Redir", "Op": "=>", "Word": {}}',
            "Unknown token",
            "$.Op",
        ),
        (
            '{"Type": "Redir", "Op": ">", "Word": {"Type": "Lit", "Value": "x"}}',
            "Expected Word",
            "$.Word",
        ),
        ('{"Type": "EvalStmt", "Stmt": null}', "got null", "$.Stmt"),
    ],
)
def test_load_errors(source: str, message: str, path):
    with pytest.raises(LoadError) as excinfo:
        load_json(source)
    assert message in str(excinfo.value)
    assert excinfo.value.path == path


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        load_file(tmp_path / "missing.json")
