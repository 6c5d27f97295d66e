import pytest

from printer import print_node
from syntax import (
    ArithmExpr,
    ArrayExpr,
    Assign,
    BinaryExpr,
    CmdInput,
    CmdSubst,
    Command,
    Expansion,
    Index,
    Lit,
    ParamExp,
    ParenExpr,
    Quoted,
    Replace,
    SglQuoted,
    Stmt,
    Subshell,
    Token,
    UnaryExpr,
    Word,
)


def _word(value: str) -> Word:
    return Word(parts=[Lit(value)])


def _cmd(*args: str) -> Stmt:
    return Stmt(node=Command(args=[_word(arg) for arg in args]))


def test_word_parts_are_concatenated():
    word = Word(parts=[Lit("a"), SglQuoted("b c"), ParamExp(param=Lit("d"), short=True)])
    assert print_node(word) == "a'b c'$d"


def test_single_quoted_is_verbatim():
    assert print_node(SglQuoted('$x "y"')) == "'$x \"y\"'"


@pytest.mark.parametrize(
    "quote, expected",
    [
        (Token.DQUOTE, '"hi"'),
        (Token.SQUOTE, "'hi'"),
        (Token.DOLLSQ, "$'hi'"),
        (Token.DOLLDQ, '$"hi"'),
    ],
)
def test_quote_pairs(quote, expected):
    assert print_node(Quoted(quote=quote, parts=[Lit("hi")])) == expected


def test_quoted_nested_parts():
    node = Quoted(quote=Token.DQUOTE, parts=[Lit("x="), ParamExp(param=Lit("x"), short=True)])
    assert print_node(node) == '"x=$x"'


def test_command_substitution():
    assert print_node(CmdSubst(stmts=[_cmd("echo", "hi")])) == "$(echo hi)"
    assert print_node(CmdSubst(stmts=[_cmd("a"), _cmd("b")], backquotes=True)) == "`a; b`"


def test_command_substitution_of_subshell():
    node = CmdSubst(stmts=[Stmt(node=Subshell(stmts=[_cmd("a")]))])
    assert print_node(node) == "$( (a))"


def test_process_input():
    assert print_node(CmdInput(stmts=[_cmd("ls", "-l")])) == "<(ls -l)"


@pytest.mark.parametrize(
    "node, expected",
    [
        (ParamExp(param=Lit("x"), short=True), "$x"),
        (ParamExp(param=Lit("x")), "${x}"),
        (ParamExp(param=Lit("x"), length=True), "${#x}"),
        (ParamExp(param=Lit("a"), ind=Index(word=_word("1"))), "${a[1]}"),
        (ParamExp(param=Lit("a"), repl=Replace(orig=_word("x"), with_=_word("y"))), "${a/x/y}"),
        (
            ParamExp(param=Lit("a"), repl=Replace(orig=_word("x"), with_=_word("y"), all=True)),
            "${a//x/y}",
        ),
        (ParamExp(param=Lit("a"), exp=Expansion(op=Token.COLMINUS, word=_word("def"))), "${a:-def}"),
        (ParamExp(param=Lit("a"), exp=Expansion(op=Token.DREM, word=_word(".*"))), "${a%%.*}"),
    ],
)
def test_parameter_expansions(node, expected):
    assert print_node(node) == expected


def test_braced_clauses_print_in_order():
    node = ParamExp(
        param=Lit("a"),
        ind=Index(word=_word("@")),
        exp=Expansion(op=Token.COLPLUS, word=_word("set")),
    )
    assert print_node(node) == "${a[@]:+set}"


def test_short_parameter_ignores_braced_clauses():
    node = ParamExp(
        param=Lit("a"),
        short=True,
        length=True,
        ind=Index(word=_word("1")),
        repl=Replace(orig=_word("x"), with_=_word("y")),
        exp=Expansion(op=Token.COLMINUS, word=_word("z")),
    )
    assert print_node(node) == "$a"


def test_arithmetic_expansion():
    expr = BinaryExpr(
        op=Token.MUL,
        x=ParenExpr(x=BinaryExpr(op=Token.PLUS, x=_word("a"), y=_word("b"))),
        y=_word("c"),
    )
    assert print_node(ArithmExpr(x=expr)) == "$(((a + b) * c))"
    assert print_node(ArithmExpr()) == "$(())"


def test_comma_operator_has_no_leading_space():
    expr = BinaryExpr(op=Token.COMMA, x=_word("a"), y=_word("b"))
    assert print_node(ArithmExpr(x=expr)) == "$((a, b))"


def test_unary_operators():
    assert print_node(UnaryExpr(op=Token.MINUS, x=_word("x"))) == "-x"
    assert print_node(UnaryExpr(op=Token.DEC, x=_word("x"), post=True)) == "x--"
    assert print_node(UnaryExpr(op=Token.NOT, x=_word("x"))) == "!x"


def test_array_assignment():
    value = Word(parts=[ArrayExpr(list=[_word("1"), _word("2")])])
    assert print_node(Assign(name=Lit("a"), value=value)) == "a=(1 2)"
    assert print_node(ArrayExpr()) == "()"
