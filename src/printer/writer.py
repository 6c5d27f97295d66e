"""
Render shell syntax trees back into shell source text.

`fprint` walks a tree depth-first and writes text chunks to any object with a
`write(str)` method. The first failing write is remembered and every later
write is skipped, so the walk always finishes; the failure is then raised as a
`SinkError`. The output is not a byte-for-byte echo of whatever source the
tree came from: comments and original layout are gone, and statements are
separated by `; ` or a line break according to `Stmt.newline_after`.
"""

from __future__ import annotations

import io
from typing import Any, Iterable, List, Optional, TextIO

from syntax import (
    ArithmExpr,
    ArrayExpr,
    Assign,
    BinaryExpr,
    Block,
    CaseStmt,
    CmdInput,
    CmdSubst,
    Command,
    CStyleCond,
    CStyleLoop,
    DeclStmt,
    EvalStmt,
    Expansion,
    File,
    ForStmt,
    FuncDecl,
    IfStmt,
    Index,
    LetStmt,
    Lit,
    ParamExp,
    ParenExpr,
    Quoted,
    Redir,
    Replace,
    SglQuoted,
    Stmt,
    StmtCond,
    Subshell,
    Token,
    UnaryExpr,
    UntilStmt,
    WhileStmt,
    Word,
    WordIter,
)


class SinkError(RuntimeError):
    """Raised once a tree walk finishes if writing to the sink failed."""

    def __init__(self, error: BaseException):
        super().__init__(f"Failed to write output: {error}")
        self.error = error


class Printer:
    """Single-use printing session over one sink."""

    def __init__(self, sink: TextIO):
        self.sink = sink
        self.err: Optional[BaseException] = None
        self.newline = False

    def pr(self, *chunks: Any) -> None:
        if self.err is not None:
            return
        try:
            self.sink.write("".join(str(chunk) for chunk in chunks))
        except (OSError, ValueError) as exc:
            self.err = exc

    def print(self, node: Any) -> None:
        self.node(node)
        if self.err is not None:
            raise SinkError(self.err) from self.err

    # ------------------------------------------------------------ joins

    def node_join(self, nodes: Iterable[Any], sep: str) -> None:
        for i, node in enumerate(nodes):
            if i > 0:
                self.pr(sep)
            self.node(node)

    def word_join(self, words: Iterable[Word], sep: str) -> None:
        for i, word in enumerate(words):
            if i > 0:
                self.pr(sep)
            self._print_Word(word)

    def stmt_join(self, stmts: List[Stmt]) -> None:
        self.newline = False
        for i, stmt in enumerate(stmts):
            if self.newline:
                self.newline = False
                self.pr("\n")
            elif i > 0:
                self.pr(Token.SEMICOLON, " ")
            self._print_Stmt(stmt)
            self.newline = stmt.newline_after()

    def stmt_list(self, stmts: List[Stmt]) -> None:
        """Statement list nested in a construct closed by a reserved word."""
        if not stmts:
            self.pr(Token.SEMICOLON, " ")
            return
        self.pr(" ")
        self.stmt_join(stmts)
        if self.newline:
            self.pr("\n")
        else:
            self.pr(Token.SEMICOLON, " ")

    def semicolon_if_nil(self, cond: Any) -> None:
        if cond is None:
            self.pr(Token.SEMICOLON, " ")
            return
        self.node(cond)

    # ---------------------------------------------------------- dispatch

    def node(self, node: Any) -> None:
        handler = getattr(self, f"_print_{type(node).__name__}", None)
        if handler is None:
            raise TypeError(f"Cannot print node of type {type(node).__name__}")
        handler(node)

    def opt_node(self, node: Any) -> None:
        if node is not None:
            self.node(node)

    def _print_File(self, x: File) -> None:
        self.stmt_join(x.stmts)

    def _print_Stmt(self, x: Stmt) -> None:
        first = True
        if x.negated:
            self.pr(Token.NOT)
            first = False
        for assign in x.assigns:
            if not first:
                self.pr(" ")
            self._print_Assign(assign)
            first = False
        if x.node is not None:
            if not first:
                self.pr(" ")
            self.node(x.node)
            first = False
        for redir in x.redirs:
            if not first:
                self.pr(" ")
            self._print_Redir(redir)
            first = False
        if x.background:
            if not first:
                self.pr(" ")
            self.pr(Token.AND)

    def _print_Redir(self, x: Redir) -> None:
        self.opt_node(x.n)
        self.pr(x.op)
        if x.word.parts and isinstance(x.word.parts[0], CmdInput):
            # `< <(cmd)`, not `<<(cmd)`
            self.pr(" ")
        self._print_Word(x.word)

    def _print_Assign(self, x: Assign) -> None:
        if x.name is not None:
            self.node(x.name)
            self.pr("+=" if x.append else "=")
        self._print_Word(x.value)

    def _print_Command(self, x: Command) -> None:
        self.word_join(x.args, " ")

    def _print_Subshell(self, x: Subshell) -> None:
        self.pr(Token.LPAREN)
        if not x.stmts or _starts_with_subshell(x.stmts):
            # `()` and `((` mean something else
            self.pr(" ")
        self.stmt_join(x.stmts)
        self.pr(Token.RPAREN)

    def _print_Block(self, x: Block) -> None:
        self.pr(Token.LBRACE)
        self.stmt_list(x.stmts)
        self.pr(Token.RBRACE)

    def _print_IfStmt(self, x: IfStmt) -> None:
        self.pr(Token.IF)
        self.semicolon_if_nil(x.cond)
        self.pr(Token.THEN)
        self.stmt_list(x.then_stmts)
        for elif_ in x.elifs:
            self.pr(Token.ELIF)
            self.semicolon_if_nil(elif_.cond)
            self.pr(Token.THEN)
            self.stmt_list(elif_.then_stmts)
        if x.else_stmts:
            self.pr(Token.ELSE)
            self.stmt_list(x.else_stmts)
        self.pr(Token.FI)

    def _print_StmtCond(self, x: StmtCond) -> None:
        self.stmt_list(x.stmts)

    def _print_CStyleCond(self, x: CStyleCond) -> None:
        self.pr(" ((")
        self.node(x.cond)
        self.pr(")); ")

    def _print_WhileStmt(self, x: WhileStmt) -> None:
        self.pr(Token.WHILE)
        self.semicolon_if_nil(x.cond)
        self.pr(Token.DO)
        self.stmt_list(x.do_stmts)
        self.pr(Token.DONE)

    def _print_UntilStmt(self, x: UntilStmt) -> None:
        self.pr(Token.UNTIL)
        self.semicolon_if_nil(x.cond)
        self.pr(Token.DO)
        self.stmt_list(x.do_stmts)
        self.pr(Token.DONE)

    def _print_ForStmt(self, x: ForStmt) -> None:
        self.pr(Token.FOR, " ")
        self.node(x.cond)
        self.pr(Token.SEMICOLON, " ", Token.DO)
        self.stmt_list(x.do_stmts)
        self.pr(Token.DONE)

    def _print_WordIter(self, x: WordIter) -> None:
        self.node(x.name)
        if x.list:
            self.pr(" ", Token.IN, " ")
            self.word_join(x.list, " ")

    def _print_CStyleLoop(self, x: CStyleLoop) -> None:
        self.pr("((")
        self.opt_node(x.init)
        self.pr("; ")
        self.opt_node(x.cond)
        self.pr("; ")
        self.opt_node(x.post)
        self.pr("))")

    def _print_UnaryExpr(self, x: UnaryExpr) -> None:
        if not x.post:
            self.pr(x.op)
        self.node(x.x)
        if x.post:
            self.pr(x.op)

    def _print_BinaryExpr(self, x: BinaryExpr) -> None:
        self.node(x.x)
        if x.op is not Token.COMMA:
            self.pr(" ")
        self.pr(x.op, " ")
        self.node(x.y)

    def _print_ParenExpr(self, x: ParenExpr) -> None:
        self.pr(Token.LPAREN)
        self.node(x.x)
        self.pr(Token.RPAREN)

    def _print_FuncDecl(self, x: FuncDecl) -> None:
        if x.bash_style:
            self.pr(Token.FUNCTION, " ")
        self.node(x.name)
        self.pr("() ")
        self._print_Stmt(x.body)

    def _print_Word(self, x: Word) -> None:
        self.node_join(x.parts, "")

    def _print_Lit(self, x: Lit) -> None:
        self.pr(x.value)

    def _print_SglQuoted(self, x: SglQuoted) -> None:
        self.pr(Token.SQUOTE, x.value, Token.SQUOTE)

    def _print_Quoted(self, x: Quoted) -> None:
        stop = x.quote
        if stop is Token.DOLLSQ:
            stop = Token.SQUOTE
        elif stop is Token.DOLLDQ:
            stop = Token.DQUOTE
        self.pr(x.quote)
        self.node_join(x.parts, "")
        self.pr(stop)

    def _print_CmdSubst(self, x: CmdSubst) -> None:
        if x.backquotes:
            self.pr(Token.BQUOTE)
        else:
            self.pr(Token.DOLLAR, Token.LPAREN)
            if _starts_with_subshell(x.stmts):
                self.pr(" ")
        self.stmt_join(x.stmts)
        if x.backquotes:
            self.pr(Token.BQUOTE)
        else:
            self.pr(Token.RPAREN)

    def _print_ParamExp(self, x: ParamExp) -> None:
        if x.short:
            self.pr(Token.DOLLAR)
            self.node(x.param)
            return
        self.pr("${")
        if x.length:
            self.pr(Token.HASH)
        self.node(x.param)
        self.opt_node(x.ind)
        self.opt_node(x.repl)
        self.opt_node(x.exp)
        self.pr("}")

    def _print_Index(self, x: Index) -> None:
        self.pr(Token.LBRACK)
        self._print_Word(x.word)
        self.pr(Token.RBRACK)

    def _print_Replace(self, x: Replace) -> None:
        if x.all:
            self.pr(Token.QUO)
        self.pr(Token.QUO)
        self._print_Word(x.orig)
        self.pr(Token.QUO)
        self._print_Word(x.with_)

    def _print_Expansion(self, x: Expansion) -> None:
        self.pr(x.op)
        self._print_Word(x.word)

    def _print_ArithmExpr(self, x: ArithmExpr) -> None:
        self.pr("$((")
        self.opt_node(x.x)
        self.pr("))")

    def _print_CaseStmt(self, x: CaseStmt) -> None:
        self.pr(Token.CASE, " ")
        self._print_Word(x.word)
        self.pr(" ", Token.IN)
        for i, clause in enumerate(x.list):
            if i > 0:
                self.pr(Token.DSEMICOLON)
            self.pr(" ")
            self.word_join(clause.patterns, " | ")
            self.pr(") ")
            self.node_join(clause.stmts, "; ")
        self.pr(Token.SEMICOLON, " ", Token.ESAC)

    def _print_DeclStmt(self, x: DeclStmt) -> None:
        self.pr(Token.LOCAL if x.local else Token.DECLARE)
        for word in x.opts:
            self.pr(" ")
            self._print_Word(word)
        for assign in x.assigns:
            self.pr(" ")
            self._print_Assign(assign)

    def _print_ArrayExpr(self, x: ArrayExpr) -> None:
        self.pr(Token.LPAREN)
        self.word_join(x.list, " ")
        self.pr(Token.RPAREN)

    def _print_CmdInput(self, x: CmdInput) -> None:
        self.pr(Token.CMDIN)
        self.stmt_join(x.stmts)
        self.pr(Token.RPAREN)

    def _print_EvalStmt(self, x: EvalStmt) -> None:
        self.pr(Token.EVAL, " ")
        self._print_Stmt(x.stmt)

    def _print_LetStmt(self, x: LetStmt) -> None:
        self.pr(Token.LET, " ")
        self.node_join(x.exprs, " ")


def _starts_with_subshell(stmts: List[Stmt]) -> bool:
    if not stmts:
        return False
    first = stmts[0]
    return (
        isinstance(first.node, Subshell)
        and not first.negated
        and not first.assigns
    )


def fprint(sink: TextIO, node: Any) -> None:
    """
    Write the shell source for `node` to `sink`.

    Raises:
        SinkError: If any write to `sink` failed. Writes after the first
            failure are not attempted.
    """
    Printer(sink).print(node)


def print_node(node: Any) -> str:
    """Render `node` to a string."""
    buffer = io.StringIO()
    fprint(buffer, node)
    return buffer.getvalue()


__all__ = ["Printer", "SinkError", "fprint", "print_node"]
