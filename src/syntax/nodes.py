"""
Node definitions for shell syntax trees.

Every node is an immutable dataclass. Trees are built by a parser (or by
`loader.load_json`) and only ever read by the printer. The `Union` aliases at
the bottom of the module list the closed set of variants each position in the
tree may hold.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .tokens import Token


# ---------------------------------------------------------------- words


@dataclass(frozen=True)
class Lit:
    value: str


@dataclass(frozen=True)
class SglQuoted:
    value: str


@dataclass(frozen=True)
class Quoted:
    """Quoted region; `quote` is the opening token (`"`, `'`, `$'` or `$"`)."""

    quote: Token
    parts: List[WordPart] = field(default_factory=list)


@dataclass(frozen=True)
class Word:
    """Concatenation of parts with nothing in between."""

    parts: List[WordPart] = field(default_factory=list)


@dataclass(frozen=True)
class Index:
    word: Word


@dataclass(frozen=True)
class Replace:
    orig: Word
    with_: Word
    all: bool = False


@dataclass(frozen=True)
class Expansion:
    op: Token
    word: Word = field(default_factory=Word)


@dataclass(frozen=True)
class ParamExp:
    """
    Parameter expansion.

    Short expansions (`$name`) never carry an index, replacement or
    expansion operator; those only appear in the braced form.
    """

    param: Lit
    short: bool = False
    length: bool = False
    ind: Optional[Index] = None
    repl: Optional[Replace] = None
    exp: Optional[Expansion] = None


@dataclass(frozen=True)
class CmdSubst:
    stmts: List[Stmt] = field(default_factory=list)
    backquotes: bool = False


@dataclass(frozen=True)
class ArithmExpr:
    x: Optional[ArithmNode] = None


@dataclass(frozen=True)
class ArrayExpr:
    list: List[Word] = field(default_factory=list)


@dataclass(frozen=True)
class CmdInput:
    stmts: List[Stmt] = field(default_factory=list)


# ---------------------------------------------------------- expressions


@dataclass(frozen=True)
class UnaryExpr:
    op: Token
    x: ArithmNode
    post: bool = False


@dataclass(frozen=True)
class BinaryExpr:
    op: Token
    x: ArithmNode
    y: ArithmNode


@dataclass(frozen=True)
class ParenExpr:
    x: ArithmNode


# ----------------------------------------------------------- statements


@dataclass(frozen=True)
class Assign:
    """`name=value`, `name+=value`, or a bare value when `name` is None."""

    value: Word = field(default_factory=Word)
    name: Optional[Lit] = None
    append: bool = False


@dataclass(frozen=True)
class Redir:
    op: Token
    word: Word
    n: Optional[Lit] = None


@dataclass(frozen=True)
class Stmt:
    node: Optional[Node] = None
    negated: bool = False
    assigns: List[Assign] = field(default_factory=list)
    redirs: List[Redir] = field(default_factory=list)
    background: bool = False

    def newline_after(self) -> bool:
        """
        Whether a line break, rather than `; `, should follow this statement.

        A backgrounded statement already ends in `&`, which cannot be
        followed by `;`. Compound commands closed by a reserved word (or a
        brace) read naturally at the end of a line.
        """
        if self.background:
            return True
        if self.redirs:
            return False
        node = self.node
        if isinstance(node, FuncDecl):
            return node.body.newline_after()
        return isinstance(
            node, (IfStmt, WhileStmt, UntilStmt, ForStmt, CaseStmt, Block)
        )


@dataclass(frozen=True)
class File:
    stmts: List[Stmt] = field(default_factory=list)


# ------------------------------------------------------------- commands


@dataclass(frozen=True)
class Command:
    args: List[Word] = field(default_factory=list)


@dataclass(frozen=True)
class Subshell:
    stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class Block:
    stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class StmtCond:
    stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class CStyleCond:
    cond: ArithmNode


@dataclass(frozen=True)
class Elif:
    cond: Optional[Cond] = None
    then_stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class IfStmt:
    cond: Optional[Cond] = None
    then_stmts: List[Stmt] = field(default_factory=list)
    elifs: List[Elif] = field(default_factory=list)
    else_stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class WhileStmt:
    cond: Optional[Cond] = None
    do_stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class UntilStmt:
    cond: Optional[Cond] = None
    do_stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class WordIter:
    name: Lit
    list: List[Word] = field(default_factory=list)


@dataclass(frozen=True)
class CStyleLoop:
    """`((init; cond; post))`; any of the three parts may be missing."""

    init: Optional[ArithmNode] = None
    cond: Optional[ArithmNode] = None
    post: Optional[ArithmNode] = None


@dataclass(frozen=True)
class ForStmt:
    cond: Loop
    do_stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class PatternList:
    patterns: List[Word] = field(default_factory=list)
    stmts: List[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class CaseStmt:
    word: Word
    list: List[PatternList] = field(default_factory=list)


@dataclass(frozen=True)
class FuncDecl:
    name: Lit
    body: Stmt
    bash_style: bool = False


@dataclass(frozen=True)
class DeclStmt:
    local: bool = False
    opts: List[Word] = field(default_factory=list)
    assigns: List[Assign] = field(default_factory=list)


@dataclass(frozen=True)
class LetStmt:
    exprs: List[ArithmNode] = field(default_factory=list)


@dataclass(frozen=True)
class EvalStmt:
    stmt: Stmt


WordPart = Union[
    Lit, SglQuoted, Quoted, ParamExp, CmdSubst, ArithmExpr, ArrayExpr, CmdInput
]
ArithmNode = Union[Word, UnaryExpr, BinaryExpr, ParenExpr]
Cond = Union[StmtCond, CStyleCond]
Loop = Union[WordIter, CStyleLoop]
Node = Union[
    Command,
    Subshell,
    Block,
    IfStmt,
    WhileStmt,
    UntilStmt,
    ForStmt,
    CaseStmt,
    FuncDecl,
    DeclStmt,
    LetStmt,
    EvalStmt,
]


__all__ = [
    "ArithmExpr",
    "ArithmNode",
    "ArrayExpr",
    "Assign",
    "BinaryExpr",
    "Block",
    "CStyleCond",
    "CStyleLoop",
    "CaseStmt",
    "CmdInput",
    "CmdSubst",
    "Command",
    "Cond",
    "DeclStmt",
    "Elif",
    "EvalStmt",
    "Expansion",
    "File",
    "ForStmt",
    "FuncDecl",
    "IfStmt",
    "Index",
    "LetStmt",
    "Lit",
    "Loop",
    "Node",
    "ParamExp",
    "ParenExpr",
    "PatternList",
    "Quoted",
    "Redir",
    "Replace",
    "SglQuoted",
    "Stmt",
    "StmtCond",
    "Subshell",
    "UnaryExpr",
    "UntilStmt",
    "WhileStmt",
    "Word",
    "WordIter",
    "WordPart",
]
